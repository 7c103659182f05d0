"""
            ***** EXPONENTIAL RATE HYPOTHESIS TESTS: SIGNIFICANCE VS SAMPLE SIZE ******
FILE: likelihood_ratio_facility.py
Description: Build the log-likelihood ratio (LLR) distribution of each hypothesis for a given number of
measurements per experiment.
The ratio is always density under hypothesis 1 over density under hypothesis 0, whichever hypothesis generated
the data, so the H0 distribution leans negative and the H1 distribution leans positive.
"""
from typing import Tuple

import numpy as np

from hypothesis_test_errors import InsufficientDataError
from measurement_loader import Hypothesis


def compute_exponential_log_pdf(rate, x):
    # evaluated in log space, rate * exp(-rate * x) underflows to 0 for large rate * x
    return np.log(rate) - rate * x


def compute_log_likelihood_ratio(x, rate_0: float, rate_1: float):
    return compute_exponential_log_pdf(rate_1, x) - compute_exponential_log_pdf(rate_0, x)


def split_into_experiments(measurements: np.ndarray, measurements_per_experiment: int,
                           num_experiments: int) -> np.ndarray:
    """
    Experiment e uses measurements[M*e: M*(e+1)], so no measurement is used twice for the same M
    :return: matrix of shape (num_experiments, measurements_per_experiment)
    """
    required_count = measurements_per_experiment * num_experiments
    if len(measurements) < required_count:
        raise InsufficientDataError("{} measurements needed for {} experiments of {} measurements, got {}".format(
            required_count, num_experiments, measurements_per_experiment, len(measurements)))
    return np.reshape(measurements[:required_count], (num_experiments, measurements_per_experiment))


def build_llr_distribution(measurements: np.ndarray, measurements_per_experiment: int, num_experiments: int,
                           rate_0: float, rate_1: float) -> np.ndarray:
    """
    :param measurements: inter-event times of one hypothesis
    :param measurements_per_experiment: M
    :param num_experiments: Nexp
    :param rate_0: rate of hypothesis 0
    :param rate_1: rate of hypothesis 1
    :return: the Nexp LLR values sorted in ascending order
    """
    experiments = split_into_experiments(measurements, measurements_per_experiment, num_experiments)
    llr_per_measurement = compute_log_likelihood_ratio(experiments, rate_0, rate_1)
    return np.sort(np.sum(llr_per_measurement, axis=1))


def build_llr_distributions(hypothesis_0: Hypothesis, hypothesis_1: Hypothesis, measurements_per_experiment: int,
                            num_experiments: int) -> Tuple[np.ndarray, np.ndarray]:
    rate_0 = hypothesis_0.rate
    rate_1 = hypothesis_1.rate
    llr_0 = build_llr_distribution(hypothesis_0.measurements, measurements_per_experiment, num_experiments,
                                   rate_0, rate_1)
    llr_1 = build_llr_distribution(hypothesis_1.measurements, measurements_per_experiment, num_experiments,
                                   rate_0, rate_1)
    return llr_0, llr_1
