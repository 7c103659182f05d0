"""
            ***** EXPONENTIAL RATE HYPOTHESIS TESTS: SIGNIFICANCE VS SAMPLE SIZE ******
FILE: significance_statistics_facility.py
Description: Find the critical value of the test for which the type I and type II error rates are equal
(alpha = beta) and return that significance level.
Also the n-sigma significance levels used to annotate the significance curves.
"""
import math
from typing import Sequence

from scipy.special import erf

from hypothesis_test_errors import InsufficientDataError


def find_equal_error_significance(llr_0: Sequence[float], llr_1: Sequence[float]) -> float:
    """
    Each value of the H0 distribution is a candidate threshold t = llr_0[a].
    a is the number of H0 experiments accepted (type I count n0 - a),
    b is the number of H1 experiments falling below t (type II count).
    Select the a that minimizes |b + a - n0|, ties go to the largest a.

    t can only decrease while a decreases, so the H1 pointer only moves left and both distributions
    are walked once.
    :param llr_0: H0 LLR distribution sorted in ascending order
    :param llr_1: H1 LLR distribution sorted in ascending order
    :return: alpha = (n0 - a) / n0, the fraction of H0 experiments rejected
    """
    n0 = len(llr_0)
    n1 = len(llr_1)
    if n0 == 0 or n1 == 0:
        raise InsufficientDataError("Cannot search a critical value with {} H0 and {} H1 experiments".format(n0, n1))
    b = n1
    best_a = n0 - 1
    best_imbalance = float('inf')
    for a in range(n0 - 1, -1, -1):
        threshold = llr_0[a]
        while b > 0 and llr_1[b - 1] >= threshold:
            b -= 1
        imbalance = abs(b + a - n0)
        if imbalance < best_imbalance:
            best_imbalance = imbalance
            best_a = a
    return (n0 - best_a) / float(n0)


def compute_sigma_significance(num_sigma) -> float:
    """
    Probability to land further than num_sigma standard deviations from the mean of a normal distribution
    """
    return 1.0 - erf(num_sigma / math.sqrt(2))


def find_first_index_less(values: Sequence[float], y: float) -> int:
    for idx, value in enumerate(values):
        if value < y:
            return idx
    return len(values)
