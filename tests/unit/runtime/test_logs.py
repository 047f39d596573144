"""Tests for file-only logging configuration."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from lazyirc.runtime.logs import ROOT_LOGGER_NAME, configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(None)

    def test_without_log_file_uses_null_handler(self) -> None:
        logger = configure_logging(None)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.NullHandler)
        self.assertFalse(logger.propagate)

    def test_log_file_receives_module_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "lazyirc.log"
            configure_logging(log_path, "DEBUG")
            logging.getLogger(f"{ROOT_LOGGER_NAME}.tests").debug("hello %s", "world")
            configure_logging(None)

            text = log_path.read_text(encoding="utf-8")
        self.assertIn("DEBUG - lazyirc.tests - hello world", text)

    def test_reconfiguring_replaces_handlers(self) -> None:
        configure_logging(None)
        logger = configure_logging(None, logging.INFO)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
