# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import unittest

from src.config.logging_config import setup_logging


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Clean up the smartshop and uvicorn loggers before each test."""
        logging.getLogger("smartshop").handlers.clear()
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            logging.getLogger(name).handlers.clear()

    def tearDown(self) -> None:
        """Leave no handlers behind for other test modules."""
        self.setUp()

    def test_setup_creates_log_file(self) -> None:
        """setup_logging returns a path that exists on disk."""
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_named_after_mode(self) -> None:
        """Log file name is <mode>_YYYYMMDD_HHMMSS.log."""
        log_path = setup_logging("api")
        self.assertRegex(log_path.name, r"^api_\d{8}_\d{6}\.log$")

    def test_file_handler_level_debug(self) -> None:
        """File handler should be set to DEBUG level."""
        setup_logging("cli")
        root_logger = logging.getLogger("smartshop")
        file_handlers = [
            h
            for h in root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)

    def test_console_handler_level_configurable(self) -> None:
        """Console threshold follows the console_level argument."""
        setup_logging("cli", console_level=logging.INFO)
        root_logger = logging.getLogger("smartshop")
        stream_handlers = [
            h
            for h in root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(stream_handlers[0].level, logging.INFO)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        """Calling setup_logging twice does not duplicate handlers."""
        setup_logging()
        root_logger = logging.getLogger("smartshop")
        count_before = len(root_logger.handlers)
        setup_logging()
        self.assertEqual(count_before, len(root_logger.handlers))

    def test_api_mode_attaches_uvicorn_loggers(self) -> None:
        """Server runs route uvicorn output into the run log."""
        setup_logging("api")
        access = logging.getLogger("uvicorn.access")
        self.assertTrue(
            any(isinstance(h, logging.FileHandler) for h in access.handlers)
        )

    def test_tui_mode_leaves_uvicorn_alone(self) -> None:
        """Only the server mode touches uvicorn's loggers."""
        setup_logging("tui")
        self.assertEqual(logging.getLogger("uvicorn.access").handlers, [])

    def test_log_file_inside_logs_dir(self) -> None:
        """Log file is created inside the logs/ directory."""
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")


if __name__ == "__main__":
    unittest.main()
