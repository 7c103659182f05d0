"""
            ***** EXPONENTIAL RATE HYPOTHESIS TESTS: SIGNIFICANCE VS SAMPLE SIZE ******
FILE: significance_sweep.py
Description: Sweep the number of measurements per experiment M and record, for each M, the significance level of
the test at which alpha = beta.

Approach:
    for M in 1, 1 + step, 1 + 2 * step, ... < mpe
        1. build the sorted LLR distribution of each hypothesis over Nexp experiments of M measurements
        2. find the critical value that balances the two error rates
        3. append (M, alpha) to the significance curve
Every step only reads the hypotheses, so the steps can run in separate processes.
"""
import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import List, Tuple

import pandas as pd
from tqdm import tqdm

from hypothesis_test_errors import InsufficientDataError
from likelihood_ratio_facility import build_llr_distributions
from measurement_loader import Hypothesis
from significance_statistics_facility import find_equal_error_significance
from significance_test_config import SweepSetting
from utilities import CURVE_COLUMNS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class SignificancePoint:
    measurements_per_experiment: int = field(default=1, compare=True)
    alpha: float = field(default=1.0, compare=True)

    def return_thousands_of_measurements(self) -> float:
        return self.measurements_per_experiment / 1000.0


def return_measurements_per_experiment(max_measurements_per_experiment: int, step: int) -> List[int]:
    return list(range(1, max_measurements_per_experiment, step))


def compute_significance_point(hypothesis_0: Hypothesis, hypothesis_1: Hypothesis, measurements_per_experiment: int,
                               num_experiments: int) -> SignificancePoint:
    llr_0, llr_1 = build_llr_distributions(hypothesis_0, hypothesis_1, measurements_per_experiment, num_experiments)
    alpha = find_equal_error_significance(llr_0, llr_1)
    return SignificancePoint(measurements_per_experiment, alpha)


def _compute_significance_point_star(args) -> SignificancePoint:
    return compute_significance_point(*args)


def check_enough_measurements(hypotheses: Tuple[Hypothesis, Hypothesis], required_count: int) -> None:
    for hypothesis in hypotheses:
        if len(hypothesis) < required_count:
            raise InsufficientDataError("Hypothesis {} has {} measurements, {} are needed".format(
                hypothesis.index, len(hypothesis), required_count))


def run_significance_sweep(hypothesis_0: Hypothesis, hypothesis_1: Hypothesis, num_experiments: int,
                           max_measurements_per_experiment: int, step: int = 1,
                           num_workers: int = 1) -> List[SignificancePoint]:
    """
    :param hypothesis_0: rate and measurements of H0
    :param hypothesis_1: rate and measurements of H1
    :param num_experiments: Nexp, number of experiments per test
    :param max_measurements_per_experiment: mpe, M stays strictly below it
    :param step: increment of M between two steps
    :param num_workers: number of processes, 1 computes the steps in order in this process
    :return: the significance curve ordered by increasing M
    """
    sweep_setting = SweepSetting(num_experiments, max_measurements_per_experiment, step, num_workers=num_workers)
    sweep_setting.validate()
    check_enough_measurements((hypothesis_0, hypothesis_1), sweep_setting.return_required_measurements())
    measurement_counts = return_measurements_per_experiment(max_measurements_per_experiment, step)
    num_steps = len(measurement_counts)
    logger.info("Analyzing data...")
    curve = []
    if num_workers == 1:
        for step_idx, measurements_per_experiment in enumerate(tqdm(measurement_counts, desc="Sweep progress: ",
                                                                    disable=None)):
            curve.append(compute_significance_point(hypothesis_0, hypothesis_1, measurements_per_experiment,
                                                    num_experiments))
            logger.info("Step {} of {} complete.".format(step_idx + 1, num_steps))
    else:
        tasks = [(hypothesis_0, hypothesis_1, measurements_per_experiment, num_experiments)
                 for measurements_per_experiment in measurement_counts]
        with ProcessPoolExecutor(max_workers=num_workers) as executor:
            # map returns the results in the order of the tasks, not in completion order
            for step_idx, point in enumerate(tqdm(executor.map(_compute_significance_point_star, tasks),
                                                  total=num_steps, desc="Sweep progress: ", disable=None)):
                curve.append(point)
                logger.info("Step {} of {} complete.".format(step_idx + 1, num_steps))
    logger.info("Sweep over {} values of measurements/experiment complete.".format(num_steps))
    return curve


def return_curve_coordinates(curve: List[SignificancePoint]) -> Tuple[List[float], List[float]]:
    """
    Coordinates handed to the plots: thousands of measurements per experiment vs alpha
    """
    thousands_of_measurements = [point.return_thousands_of_measurements() for point in curve]
    alphas = [point.alpha for point in curve]
    return thousands_of_measurements, alphas


def convert_curve_to_dataframe(curve: List[SignificancePoint]) -> pd.DataFrame:
    thousands_of_measurements, alphas = return_curve_coordinates(curve)
    return pd.DataFrame({
        CURVE_COLUMNS[0]: [point.measurements_per_experiment for point in curve],
        CURVE_COLUMNS[1]: thousands_of_measurements,
        CURVE_COLUMNS[2]: alphas,
    }, columns=CURVE_COLUMNS)
