"""
Logging for xldc.

All modules log through ``get_logger(__name__)``. Records go to standard
error through rich so they never mix with rendered output on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "xldc"

DEFAULT_LEVEL = logging.WARNING
VERBOSE_LEVEL = logging.DEBUG


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the xldc root logger."""
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the xldc root logger for one invocation.

    Args:
        verbose: Log info and debug records as well as warnings.

    Returns:
        The configured root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(VERBOSE_LEVEL if verbose else DEFAULT_LEVEL)
    return logger


__all__ = ["get_logger", "setup_logging", "ROOT_LOGGER"]
