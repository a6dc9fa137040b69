"""Logger setup shared by the whole package."""

import logging

from .config import LOGGER_NAME, LOG_LEVEL, LOG_FORMAT


def get_logger() -> logging.Logger:
    """
    Return the package logger.

    A console handler is attached the first time this is called, so repeated
    calls from different modules don't duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)

    return logger
