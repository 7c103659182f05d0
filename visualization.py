"""
            ***** EXPONENTIAL RATE HYPOTHESIS TESTS: SIGNIFICANCE VS SAMPLE SIZE ******
FILE: visualization.py
Description: plot the significance curve produced by significance_sweep.py
"""
import logging
from typing import List, Sequence

import matplotlib
from matplotlib import pyplot as plt

from significance_statistics_facility import compute_sigma_significance, find_first_index_less
from significance_sweep import SignificancePoint, return_curve_coordinates

logger = logging.getLogger(__name__)

MAX_SIGMA = 7


def return_sigma_crossings(alphas: Sequence[float], max_sigma: int = MAX_SIGMA) -> List[int]:
    """
    For n = 1, 2, ... the index of the first point of the curve whose significance is below the n-sigma level.
    Stops at the first level the curve never reaches.
    """
    crossings = []
    for num_sigma in range(1, max_sigma + 1):
        crossing_idx = find_first_index_less(alphas, compute_sigma_significance(num_sigma))
        if crossing_idx >= len(alphas):
            break
        crossings.append(crossing_idx)
    return crossings


def plot_significance_curve(curve: List[SignificancePoint], num_experiments: int, rates: Sequence[float],
                            file_prefix: str = "confidence") -> List[str]:
    """
    Plot alpha (= beta) against the thousands of measurements per experiment, with one vertical line per
    sigma level reached by the test.
    The figure is saved twice, with a logarithmic and with a linear y-axis.
    :return: names of the saved files
    """
    if not curve:
        logger.warning("Empty significance curve, nothing to plot")
        return []
    thousands_of_measurements, alphas = return_curve_coordinates(curve)
    fig, ax = plt.subplots(figsize=(10, 8))
    fig.subplots_adjust(left=0.15, right=0.95, bottom=0.1, top=0.9)
    ax.grid(True)
    ax.plot(thousands_of_measurements, alphas, '-', color='tab:blue', linewidth=2)
    ax.set_title("{} experiments per test with rates {}, {} events / second".format(num_experiments, rates[0],
                                                                                      rates[1]))
    ax.set_xlabel("1000s of Measurements/Experiment")
    ax.set_ylabel(r"Test Significance $\alpha$ (= $\beta$)")

    color_map = matplotlib.colormaps["Reds_r"]
    for num_sigma, crossing_idx in enumerate(return_sigma_crossings(alphas), start=1):
        x_crossing = thousands_of_measurements[crossing_idx]
        ax.axvline(x_crossing, color=color_map(num_sigma / (MAX_SIGMA + 1.0)), linewidth=2)
        ax.text(x_crossing, 0.99, r"$\alpha$ = {} $\sigma$".format(num_sigma), transform=ax.get_xaxis_transform(),
                rotation=90, ha='right', va='top', fontsize=9)

    # alpha >= 1 / Nexp so the log scale is always defined
    file_names = [file_prefix + ".png", file_prefix + "Linear.png"]
    ax.set_yscale('log')
    fig.savefig(file_names[0])
    ax.set_yscale('linear')
    fig.savefig(file_names[1])
    plt.close(fig)
    logger.info("Saved {} and {}".format(*file_names))
    return file_names
