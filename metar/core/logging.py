from __future__ import annotations

import logging
import sys

LOGGER_NAME = "metar"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """
    Diagnostics go to stderr as "metar: <message>", the same shape BSD warnx
    gives. Safe to call more than once; the handler is replaced, not stacked.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(f"{LOGGER_NAME}: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
