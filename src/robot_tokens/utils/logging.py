"""Logging configuration for robot-tokens.

Loguru is the single logging facade.  Modules import ``logger`` from
loguru directly; the CLI calls :func:`configure_logging` once at
startup to install the stderr sink.
"""

from __future__ import annotations

import sys

from loguru import logger


def configure_logging(verbose: bool = False) -> None:
    """Configure the global loguru logger.

    Args:
        verbose: If True, emit DEBUG records; otherwise only WARNING and above.

    Safe to call more than once; previous sinks are removed.
    """
    logger.remove()  # Remove default handler

    log_format = (
        "<level>{level: <7}</level>| "
        "<dim><cyan>{name}:{line}</cyan></dim> | "
        "<level>{message}</level>"
    )

    logger.add(
        sys.stderr,
        format=log_format,
        level="DEBUG" if verbose else "WARNING",
        colorize=None,
        backtrace=verbose,
        diagnose=False,
    )
