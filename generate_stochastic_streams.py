"""
            ***** EXPONENTIAL RATE HYPOTHESIS TESTS: SIGNIFICANCE VS SAMPLE SIZE ******
FILE: generate_stochastic_streams.py
Description: Simulate a Geiger counter: draw exponentially distributed inter-event times for a given rate
and export them in the data file format read by measurement_loader.py

    rate: <rate>
    t_0 t_1 t_2 ...
"""
import argparse
import logging
import sys
from typing import List

import numpy as np
from scipy.stats import expon
from tqdm import tqdm

from hypothesis_test_errors import HypothesisTestError
from significance_test_config import GenerationSetting
from utilities import set_up_logging

logger = logging.getLogger(__name__)

RATE_HEADER = "rate:"


def generate_exponential_inter_event_times(rate: float, num_measures: int, seed: int) -> np.ndarray:
    """
    Draw the times between consecutive events of a homogeneous Poisson process
    :param rate: events per second
    :param num_measures: number of time measurements
    :param seed: seed of the random stream, the same seed always returns the same sample
    :return: array of num_measures exponential random times
    """
    generation_setting = GenerationSetting(seed=seed, rate=rate, num_measures=num_measures)
    generation_setting.validate()
    random_state = np.random.RandomState(seed)
    return expon.rvs(scale=1.0 / rate, size=num_measures, random_state=random_state)


def write_measurement_file(file_name: str, rate: float, inter_event_times: List[float]) -> None:
    # generating large sample files can take a while, hence the progress bar
    with open(file_name, 'w') as outfile:
        outfile.write("{} {}\n".format(RATE_HEADER, repr(float(rate))))
        for inter_event_time in tqdm(inter_event_times, desc="Writing measurements: ", disable=None):
            outfile.write("{} ".format(repr(float(inter_event_time))))


def simulate_geiger_counter(generation_setting: GenerationSetting) -> np.ndarray:
    generation_setting.validate()
    inter_event_times = generate_exponential_inter_event_times(generation_setting.rate,
                                                               generation_setting.num_measures,
                                                               generation_setting.seed)
    write_measurement_file(generation_setting.output_file, generation_setting.rate, inter_event_times)
    logger.info("Wrote {} measurements with rate {} to {}".format(generation_setting.num_measures,
                                                                  generation_setting.rate,
                                                                  generation_setting.output_file))
    return inter_event_times


def parse_arguments(argv=None) -> GenerationSetting:
    parser = argparse.ArgumentParser(
        description="Generate an exponentially distributed data sample and export it to a file")
    parser.add_argument("--seed", "-seed", type=int, default=314159, help="random seed to use")
    parser.add_argument("--rate", "-rate", type=float, default=1.0, help="rate of radioactive events (per second)")
    parser.add_argument("--measures", "-measures", type=int, default=1, help="number of time measurements")
    parser.add_argument("--output", "-output", required=True, help="name of output file")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)
    set_up_logging(logging.DEBUG if args.verbose else logging.INFO)
    return GenerationSetting(seed=args.seed, rate=args.rate, num_measures=args.measures, output_file=args.output)


def main(argv=None) -> int:
    generation_setting = parse_arguments(argv)
    try:
        simulate_geiger_counter(generation_setting)
    except HypothesisTestError as error:
        logger.error(str(error))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
