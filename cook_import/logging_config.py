"""Utilities for configuring application logging."""
from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "cook_import"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

# Third-party loggers that are chatty at INFO/DEBUG
_NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "openai")


def _configure_base_logger() -> logging.Logger:
    """Configure (once) the base logger used across the application."""

    base_logger = logging.getLogger(_LOGGER_NAME)
    if base_logger.handlers:
        return base_logger

    base_logger.setLevel(logging.INFO)
    base_logger.propagate = False

    # stdout carries the recipe itself, so logs go to stderr
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(_FORMAT))
    base_logger.addHandler(stream_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return base_logger


def configure_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Apply the level from settings and attach an optional file handler."""

    base_logger = _configure_base_logger()
    base_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if log_file and not any(
        isinstance(h, logging.FileHandler) for h in base_logger.handlers
    ):
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        base_logger.addHandler(file_handler)

    base_logger.debug("Logger configured at level %s", level)
    return base_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger that shares the base handler configuration."""

    base_logger = _configure_base_logger()
    if not name or name == _LOGGER_NAME:
        return base_logger

    if name.startswith(_LOGGER_NAME + "."):
        name = name[len(_LOGGER_NAME) + 1 :]
    return base_logger.getChild(name)


__all__ = ["configure_logging", "get_logger"]
