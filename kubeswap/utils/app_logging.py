from __future__ import annotations

import logging
import sys


def verbosity_to_level(verbosity: int) -> int:
    """Map the number of ``-v`` flags to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Configure application logging to stderr.

    Stdout is kept for command output, so diagnostics never mix with it.

    Args:
        level: Logging level.

    Returns:
        Logger: Root logger configured.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    # Avoid duplicate handlers if reconfigured
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    logger.addHandler(console_handler)
    return logger
