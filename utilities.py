"""
            ***** EXPONENTIAL RATE HYPOTHESIS TESTS: SIGNIFICANCE VS SAMPLE SIZE ******
FILE: utilities.py
Description: General ancillary functions to support other libraries in this package.
Logging set-up, timing and persistence of significance curves.
"""

import logging
import os
import time
from datetime import date

import pandas as pd

CURVE_COLUMNS = ["Measurements/Experiment", "Thousands of Measurements", "Alpha"]


def set_up_logging(console_level=logging.INFO, log_directory='./logs'):
    # Warnings and errors always go to the log file, the console level is set by the caller
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    os.makedirs(log_directory, exist_ok=True)
    fh = logging.FileHandler(os.path.join(log_directory, 'warnings.log'))
    fh.setLevel(logging.WARN)
    fh.setFormatter(formatter)
    logger.addHandler(fh)
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    return logger


def my_timer(orig_func):
    def wrapper(*args, **kwargs):
        t1 = time.time()
        result = orig_func(*args, **kwargs)
        t2 = time.time() - t1
        logging.getLogger(orig_func.__module__).info("{} ran in {:.3f} secs.".format(orig_func.__name__, t2))
        return result

    wrapper.__name__ = orig_func.__name__
    wrapper.__doc__ = orig_func.__doc__
    return wrapper


class SignificanceCurveLogger:
    """
    Save and reload a significance curve as a dataframe.
    A .csv file is readable by anything, a .pkl file keeps the exact dtypes.
    """

    def __init__(self, file_prefix, is_full_path=False, file_type='csv'):
        """
        :param file_prefix: Beginning of file
        :param is_full_path: Is it the full path of the file or do we need to construct it
        :param file_type: if we need to construct is it a .csv or .pkl file
        """
        if is_full_path:
            self._file_name = file_prefix
        else:
            today = date.today()
            day_str = today.strftime("%m_%d_%y")
            self._file_name = file_prefix + day_str + "." + file_type
        self._is_pickle = self._file_name.endswith(".pkl")

    def return_file_name(self):
        return self._file_name

    def write_data(self, data_df: pd.DataFrame):
        # I overwrite every single time
        if self._is_pickle:
            data_df.to_pickle(self._file_name)
        else:
            # 17 significant digits so every float reads back exactly
            data_df.to_csv(self._file_name, index=False, float_format="%.17g")

    def load_dataframe(self) -> pd.DataFrame:
        if self._is_pickle:
            return pd.read_pickle(self._file_name)
        return pd.read_csv(self._file_name, float_precision="round_trip")
