"""Structured logger setup shared across the package."""

import logging
from pythonjsonlogger import jsonlogger

from fieldcheck.config.settings import Settings


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    The level comes from Settings so callers can turn on debug traces of the
    walk without touching code.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(Settings.from_environment().log_level)
    logger.propagate = False
    return logger
