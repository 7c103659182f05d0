"""
            ***** EXPONENTIAL RATE HYPOTHESIS TESTS: SIGNIFICANCE VS SAMPLE SIZE ******
FILE: hypothesis_test_errors.py
Description: Errors raised by the loaders, the likelihood ratio builder and the significance sweep.
None of them is recoverable within a run.
"""


class HypothesisTestError(ValueError):
    pass


class MalformedInputError(HypothesisTestError):
    """
    The data file does not start with the rate header, carries a non-positive rate
    or contains a token that is not a non-negative number
    """
    pass


class InsufficientDataError(HypothesisTestError):
    """
    Not enough measurements to fill every experiment, or an empty distribution reached the critical value search
    """
    pass


class InvalidParameterError(HypothesisTestError):
    pass
