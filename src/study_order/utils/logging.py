"""
Package logger. Output goes to stderr; stdout is reserved for the sequence.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "study_order"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
HANDLER_NAME = "study_order.stderr"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def _level_for(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Calling this again only updates the level.
    """
    level = _level_for(verbosity)
    handler = next((h for h in logger.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger
