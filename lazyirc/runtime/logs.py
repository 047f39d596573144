"""Logging setup for the chat shell.

Stdout is the drawing surface while the TUI runs, so records only ever go
to a log file; without one they are dropped by a ``NullHandler``.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
ROOT_LOGGER_NAME = "lazyirc"


def configure_logging(log_file: Path | None, level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a file or null handler to the package logger and set its level.

    Existing handlers installed by an earlier call are replaced.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler: logging.Handler
    if log_file is None:
        handler = logging.NullHandler()
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
