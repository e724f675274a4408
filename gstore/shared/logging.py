"""Logging configuration for hosts and scripts that embed the adapter."""

import logging
import sys

from gstore.core.config import get_settings


def setup_logging(level: str | None = None) -> None:
    """Configure process-wide logging to stdout.

    Level is DEBUG when settings.debug is True, otherwise settings.log_level,
    unless an explicit level is passed.
    """
    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
