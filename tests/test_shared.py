import io
import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from isocal.shared import TRACE_LEVEL_NUM, resolve_log_level, setup_logging


class TestLogging(unittest.TestCase):
    def tearDown(self):
        logger = logging.getLogger("isocal")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_log_file_under_cache_dir(self):
        with tempfile.TemporaryDirectory() as cache_dir:
            with patch.dict("os.environ", {"XDG_CACHE_HOME": cache_dir}):
                logger = setup_logging(logging.INFO)
                logger.info("hello")

            self.assertEqual(logger.name, "isocal")
            self.assertIsInstance(logger.handlers[0], logging.FileHandler)
            logger.handlers[0].close()
            log_path = os.path.join(cache_dir, "isocal", "isocal.log")
            with open(log_path) as f:
                self.assertIn("INFO - hello", f.read())

    @patch("isocal.shared.os.makedirs", side_effect=PermissionError("denied"))
    @patch("sys.stderr", new_callable=io.StringIO)
    def test_falls_back_to_null_handler(self, mock_stderr, mock_makedirs):
        logger = setup_logging(logging.INFO)

        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.NullHandler)
        self.assertIn("Failed to configure logging", mock_stderr.getvalue())

    def test_trace_level(self):
        with patch("isocal.shared.os.makedirs", side_effect=OSError("nope")), patch(
            "sys.stderr", new_callable=io.StringIO
        ):
            logger = setup_logging(TRACE_LEVEL_NUM)

        self.assertTrue(logger.isEnabledFor(TRACE_LEVEL_NUM))
        with self.assertLogs("isocal", level=TRACE_LEVEL_NUM) as captured:
            logger.trace("rendering %s", "2024-01")
        self.assertIn("rendering 2024-01", captured.output[0])


class TestResolveLogLevel(unittest.TestCase):
    def test_verbose_means_trace(self):
        self.assertEqual(resolve_log_level({}, verbose=True), TRACE_LEVEL_NUM)

    def test_environment_level(self):
        self.assertEqual(resolve_log_level({"ISOCAL_LOG_LEVEL": "debug"}), logging.DEBUG)
        self.assertEqual(resolve_log_level({"ISOCAL_LOG_LEVEL": "TRACE"}), TRACE_LEVEL_NUM)
        self.assertEqual(resolve_log_level({}), logging.INFO)

    def test_unknown_level_falls_back_to_info(self):
        self.assertEqual(resolve_log_level({"ISOCAL_LOG_LEVEL": "loud"}), logging.INFO)


if __name__ == "__main__":
    unittest.main()
