"""Application logging helpers.

All loggers live under the ``picture_book`` namespace so a single handler on
the package root covers every module.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "picture_book"
LOG_FORMAT = "[picture_book] %(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level_name: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = getattr(logging, (level_name or "").upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
