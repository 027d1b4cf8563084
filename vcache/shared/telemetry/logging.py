"""Logging configuration for vcache and its operator scripts."""

import logging
import sys

from vcache.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure process-wide logging to stdout.

    Level is DEBUG when settings.debug or verbose is set, otherwise INFO.
    The redis client logger is held at WARNING so cache HIT/MISS lines
    stay readable.

    Args:
        verbose: Force DEBUG regardless of settings (used by scripts).
    """
    settings = get_settings()
    log_level = logging.DEBUG if (settings.debug or verbose) else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("redis").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
