import logging
import os
import shutil
import tempfile
import unittest

import numpy as np
import pandas as pd

from significance_sweep import SignificancePoint, convert_curve_to_dataframe
from significance_test_config import GenerationSetting, SweepSetting, check_positive_integer
from hypothesis_test_errors import InvalidParameterError
from utilities import CURVE_COLUMNS, SignificanceCurveLogger, my_timer, set_up_logging


class TestSignificanceCurveLogger(unittest.TestCase):
    def setUp(self):
        self._directory = tempfile.mkdtemp()
        self._curve_df = convert_curve_to_dataframe([SignificancePoint(1, 0.45), SignificancePoint(11, 0.2),
                                                     SignificancePoint(21, 0.125)])

    def tearDown(self) -> None:
        shutil.rmtree(self._directory)

    def test_csv_round_trip(self):
        curve_logger = SignificanceCurveLogger(os.path.join(self._directory, "curve.csv"), is_full_path=True)
        curve_logger.write_data(self._curve_df)
        pd.testing.assert_frame_equal(curve_logger.load_dataframe(), self._curve_df)

    def test_csv_keeps_every_digit(self):
        alphas = [0.375, 0.22999999999999998, 0.17000000000000004, 1.0 / 3.0, 23.0 / 100.0]
        curve_df = convert_curve_to_dataframe([SignificancePoint(1 + 3 * idx, alpha)
                                               for idx, alpha in enumerate(alphas)])
        curve_logger = SignificanceCurveLogger(os.path.join(self._directory, "digits.csv"), is_full_path=True)
        curve_logger.write_data(curve_df)
        loaded_df = curve_logger.load_dataframe()
        self.assertEqual(loaded_df[CURVE_COLUMNS[2]].tolist(), alphas)
        self.assertEqual(loaded_df[CURVE_COLUMNS[1]].tolist(), curve_df[CURVE_COLUMNS[1]].tolist())

    def test_pickle_round_trip(self):
        curve_logger = SignificanceCurveLogger(os.path.join(self._directory, "curve_"), file_type='pkl')
        self.assertTrue(curve_logger.return_file_name().endswith(".pkl"))
        curve_logger.write_data(self._curve_df)
        loaded_df = curve_logger.load_dataframe()
        self.assertEqual(list(loaded_df.columns), CURVE_COLUMNS)
        pd.testing.assert_frame_equal(loaded_df, self._curve_df)


class TestLoggingAndTiming(unittest.TestCase):
    def setUp(self):
        self._directory = tempfile.mkdtemp()
        self._root_handlers = list(logging.getLogger().handlers)

    def tearDown(self) -> None:
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            if handler not in self._root_handlers:
                handler.close()
                root_logger.removeHandler(handler)
        shutil.rmtree(self._directory)

    def test_warnings_go_to_the_log_file(self):
        log_directory = os.path.join(self._directory, "logs")
        set_up_logging(logging.ERROR, log_directory)
        logging.getLogger("significance_sweep").warning("checking the log file")
        logging.getLogger("significance_sweep").info("not in the log file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        with open(os.path.join(log_directory, "warnings.log")) as infile:
            content = infile.read()
        self.assertIn("significance_sweep - WARNING - checking the log file", content)
        self.assertNotIn("not in the log file", content)

    def test_timer_keeps_result_and_name(self):
        @my_timer
        def add(a, b):
            return a + b

        with self.assertLogs(__name__, level=logging.INFO):
            self.assertEqual(add(2, 3), 5)
        self.assertEqual(add.__name__, "add")


class TestSettings(unittest.TestCase):
    def test_sweep_setting(self):
        sweep_setting = SweepSetting(num_experiments=100, max_measurements_per_experiment=50)
        sweep_setting.validate()
        self.assertEqual(sweep_setting.step, 1)
        self.assertEqual(sweep_setting.num_workers, 1)
        self.assertEqual(sweep_setting.return_required_measurements(), 5000)
        with self.assertRaises(InvalidParameterError):
            SweepSetting(num_experiments=100, max_measurements_per_experiment=50, step=0).validate()
        with self.assertRaises(InvalidParameterError):
            SweepSetting().validate()

    def test_non_integer_parameters(self):
        for value in [float('nan'), None, 2.5, 3.0, "10", True]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidParameterError):
                    check_positive_integer(value, "Nexp")
                with self.assertRaises(InvalidParameterError):
                    SweepSetting(num_experiments=value, max_measurements_per_experiment=5).validate()
        self.assertEqual(check_positive_integer(np.int64(7), "mpe"), 7)

    def test_generation_setting(self):
        generation_setting = GenerationSetting()
        generation_setting.validate()
        self.assertEqual(generation_setting.seed, 314159)
        self.assertEqual(generation_setting.output_file, "data.txt")
        with self.assertRaises(InvalidParameterError):
            GenerationSetting(rate=0).validate()
        with self.assertRaises(InvalidParameterError):
            GenerationSetting(num_measures=-3).validate()
        for rate in [float('nan'), float('inf'), None]:
            with self.subTest(rate=rate):
                with self.assertRaises(InvalidParameterError):
                    GenerationSetting(rate=rate).validate()


if __name__ == '__main__':
    unittest.main()
