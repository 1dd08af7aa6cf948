"""Logging setup for applications embedding the validator."""

import logging

from ohmychess.core.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL, LOGGER_NAME


def setup_logger(name: str = LOGGER_NAME, level: str | int = LOG_LEVEL) -> logging.Logger:
    """
    Configure and return the package logger.

    Calling it again only updates the level: handlers are never added twice.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    return logger
