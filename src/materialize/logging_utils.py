"""Logging helpers for the materialize package."""

from __future__ import annotations

import logging
import sys


BASE_LOGGER_NAME = "materialize"
LOG_FORMAT = "[Materialize] %(levelname)s: %(message)s"
_HANDLER_NAME = "materialize_stdout"


def _ensure_stdout_handler(base_logger: logging.Logger) -> None:
    for handler in base_logger.handlers:
        if getattr(handler, "name", None) == _HANDLER_NAME:
            return

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(logging.DEBUG)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    stream_handler.name = _HANDLER_NAME
    base_logger.addHandler(stream_handler)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach the stdout handler to the package logger.

    Safe to call repeatedly; only one handler is ever installed.
    """
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    _ensure_stdout_handler(base_logger)
    base_logger.setLevel(level)
    base_logger.propagate = False
    return base_logger


def set_base_log_level(level: int) -> None:
    logging.getLogger(BASE_LOGGER_NAME).setLevel(level)
