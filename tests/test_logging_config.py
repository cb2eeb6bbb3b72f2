# tests/test_logging_config.py

"""Tests for the application logging setup."""

import logging
import os
import tempfile
import unittest

from pricealert.utils import setup_logging


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        self.root_logger = logging.getLogger()
        self.saved_handlers = self.root_logger.handlers[:]
        self.saved_level = self.root_logger.level
        self.saved_noisy = {
            name: logging.getLogger(name).level
            for name in ("urllib3", "aiohttp.access")
        }

    def tearDown(self) -> None:
        for handler in self.root_logger.handlers[:]:
            self.root_logger.removeHandler(handler)
            handler.close()
        for handler in self.saved_handlers:
            self.root_logger.addHandler(handler)
        self.root_logger.setLevel(self.saved_level)
        for name, level in self.saved_noisy.items():
            logging.getLogger(name).setLevel(level)

    def test_console_only_by_default(self) -> None:
        """Default setup installs a single stdout handler."""
        setup_logging()
        self.assertEqual(len(self.root_logger.handlers), 1)
        self.assertNotIsInstance(
            self.root_logger.handlers[0], logging.FileHandler,
        )

    def test_level_accepts_name(self) -> None:
        """String levels are resolved case-insensitively."""
        setup_logging(level="debug")
        self.assertEqual(self.root_logger.level, logging.DEBUG)

    def test_unknown_level_name_falls_back_to_info(self) -> None:
        setup_logging(level="LOUD")
        self.assertEqual(self.root_logger.level, logging.INFO)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        """Calling setup_logging twice does not duplicate handlers."""
        setup_logging()
        count_before = len(self.root_logger.handlers)
        setup_logging()
        self.assertEqual(len(self.root_logger.handlers), count_before)

    def test_file_handler_appends(self) -> None:
        """log_to_file adds an append-mode file handler."""
        with tempfile.TemporaryDirectory() as tmp:
            log_path = os.path.join(tmp, "bot.log")
            setup_logging(log_to_file=True, log_filename=log_path)

            file_handlers = [
                h for h in self.root_logger.handlers
                if isinstance(h, logging.FileHandler)
            ]
            self.assertEqual(len(file_handlers), 1)
            self.assertEqual(file_handlers[0].mode, "a")

            logging.getLogger("pricealert.test").warning("hello file")
            file_handlers[0].flush()
            with open(log_path, encoding="utf-8") as fh:
                self.assertIn("hello file", fh.read())

            # release the file before the directory is removed
            self.root_logger.removeHandler(file_handlers[0])
            file_handlers[0].close()

    def test_noisy_loggers_quieted(self) -> None:
        """urllib3 stays at WARNING so request URLs are not logged."""
        setup_logging(level="DEBUG")
        self.assertEqual(
            logging.getLogger("urllib3").level, logging.WARNING,
        )
        self.assertEqual(
            logging.getLogger("aiohttp.access").level, logging.WARNING,
        )

    def test_unwritable_log_file_keeps_console(self) -> None:
        """A log file that cannot be opened leaves console logging in place."""
        with tempfile.TemporaryDirectory() as tmp:
            bad_path = os.path.join(tmp, "missing", "bot.log")
            setup_logging(log_to_file=True, log_filename=bad_path)

        self.assertEqual(len(self.root_logger.handlers), 1)
        self.assertNotIsInstance(
            self.root_logger.handlers[0], logging.FileHandler,
        )


if __name__ == "__main__":
    unittest.main()
