"""

            ***** EXPONENTIAL RATE HYPOTHESIS TESTS: SIGNIFICANCE VS SAMPLE SIZE ******
FILE: significance_test_config.py
Description:
    settings of the significance sweep and of the sample generator
supports exponential_hypothesis_test.py and generate_stochastic_streams.py
"""
import numbers
from typing import Optional

from hypothesis_test_errors import InvalidParameterError


def check_positive_integer(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidParameterError("{} must be a positive integer, got {}".format(name, value))
    return int(value)


class SweepSetting:
    num_experiments: int
    max_measurements_per_experiment: int
    step: int
    h0_file: Optional[str]
    h1_file: Optional[str]
    num_workers: int
    output_prefix: str

    def __init__(self, num_experiments: int = 0, max_measurements_per_experiment: int = 0, step: int = 1,
                 h0_file: Optional[str] = None, h1_file: Optional[str] = None, num_workers: int = 1,
                 output_prefix: str = "confidence"):
        self.num_experiments = num_experiments
        self.max_measurements_per_experiment = max_measurements_per_experiment
        self.step = step
        self.h0_file = h0_file
        self.h1_file = h1_file
        self.num_workers = num_workers
        self.output_prefix = output_prefix

    def validate(self) -> None:
        check_positive_integer(self.num_experiments, "Nexp")
        check_positive_integer(self.max_measurements_per_experiment, "mpe")
        check_positive_integer(self.step, "step")
        check_positive_integer(self.num_workers, "workers")

    def return_required_measurements(self) -> int:
        # every experiment of the largest step must be filled without reusing data
        return self.num_experiments * self.max_measurements_per_experiment

    def return_input_files(self):
        return [self.h0_file, self.h1_file]


class GenerationSetting:
    seed: int
    rate: float
    num_measures: int
    output_file: str

    def __init__(self, seed: int = 314159, rate: float = 1.0, num_measures: int = 1, output_file: str = "data.txt"):
        self.seed = seed
        self.rate = rate
        self.num_measures = num_measures
        self.output_file = output_file

    def validate(self) -> None:
        if not isinstance(self.rate, numbers.Real) or not 0 < self.rate < float("inf"):
            raise InvalidParameterError("rate must be positive, got {}".format(self.rate))
        check_positive_integer(self.num_measures, "measures")
