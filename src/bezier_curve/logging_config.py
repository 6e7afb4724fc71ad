"""
Log output for the flattening routines.

The library only emits records (DEBUG for joint corrections and segment
counts, ERROR when a subdivision limit is hit). Applications that want
to see them call ``setup_logging`` once.
"""
from __future__ import annotations

import logging
from typing import TextIO

PACKAGE_LOGGER = "src.bezier_curve"


def setup_logging(level: int = logging.DEBUG, stream: TextIO | None = None) -> logging.Logger:
    """Attach one stream handler to the package logger, replacing any earlier one."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger
