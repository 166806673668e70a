"""Logging helpers for unistore.

Storage adapters log through module loggers from get_logger; only entry
points such as scripts call setup_logging.
"""

import logging
import sys

from unistore.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Send log records to stdout; DEBUG shows every storage call.

    The level comes from the DEBUG setting (DEBUG when true, INFO otherwise).
    """
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a unistore module; pass __name__."""
    return logging.getLogger(name)
