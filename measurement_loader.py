"""
            ***** EXPONENTIAL RATE HYPOTHESIS TESTS: SIGNIFICANCE VS SAMPLE SIZE ******
FILE: measurement_loader.py
Description: Load the measurements of each hypothesis from the files written by generate_stochastic_streams.py
The number of measurements is checked once here, before any likelihood ratio is computed.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from hypothesis_test_errors import InsufficientDataError, MalformedInputError

logger = logging.getLogger(__name__)

RATE_HEADER = "rate:"


@dataclass(frozen=True)
class Hypothesis:
    index: int
    rate: float
    measurements: np.ndarray = field(repr=False, compare=False)

    def __post_init__(self):
        if not self.rate > 0:
            raise MalformedInputError("Hypothesis {} has an invalid rate parameter {}".format(self.index, self.rate))
        measurements = np.array(self.measurements, dtype=float)
        measurements.setflags(write=False)
        object.__setattr__(self, "measurements", measurements)

    def __len__(self):
        return len(self.measurements)


def parse_rate_header(tokens: List[str], file_name: str) -> float:
    if not tokens or tokens[0] != RATE_HEADER:
        raise MalformedInputError("Input file {} formatted improperly, expected '{}' header".format(file_name,
                                                                                                    RATE_HEADER))
    if len(tokens) < 2:
        raise MalformedInputError("Input file {} is missing its rate parameter".format(file_name))
    try:
        rate = float(tokens[1])
    except ValueError:
        raise MalformedInputError("Input file {} contains invalid rate parameter {}".format(file_name, tokens[1]))
    if not rate > 0:
        raise MalformedInputError("Input file {} contains invalid rate parameter {}".format(file_name, rate))
    return rate


def parse_measurements(tokens: List[str], file_name: str, required_count: int) -> np.ndarray:
    """
    Convert the first required_count measurement tokens, the remaining ones are never read
    """
    kept_tokens = tokens[:required_count]
    try:
        measurements = np.array([float(token) for token in kept_tokens], dtype=float)
    except ValueError as error:
        raise MalformedInputError("Input file {} contains a non numeric measurement: {}".format(file_name, error))
    if not np.all(np.isfinite(measurements)) or np.any(measurements < 0):
        raise MalformedInputError("Input file {} contains negative or infinite measurements".format(file_name))
    return measurements


def load_hypothesis(file_name: str, index: int, required_count: int) -> Hypothesis:
    """
    :param file_name: data file for the hypothesis
    :param index: 0 or 1
    :param required_count: Nexp * mpe, the number of measurements used by the largest sweep step
    :return: the hypothesis with exactly required_count measurements
    """
    with open(file_name, 'r') as infile:
        tokens = infile.read().split()
    rate = parse_rate_header(tokens, file_name)
    logger.info("Reading data set {}...".format(index))
    measurements = parse_measurements(tokens[2:], file_name, required_count)
    if len(measurements) < required_count:
        raise InsufficientDataError(
            "{} contains too few measurements to complete analysis: {} < {}".format(file_name, len(measurements),
                                                                                     required_count))
    return Hypothesis(index=index, rate=rate, measurements=measurements)


def load_hypotheses(h0_file: str, h1_file: str, num_experiments: int,
                    max_measurements_per_experiment: int) -> Tuple[Hypothesis, Hypothesis]:
    required_count = num_experiments * max_measurements_per_experiment
    hypothesis_0 = load_hypothesis(h0_file, 0, required_count)
    hypothesis_1 = load_hypothesis(h1_file, 1, required_count)
    return hypothesis_0, hypothesis_1
