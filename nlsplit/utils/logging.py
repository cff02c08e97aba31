"""Loguru logger configuration."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru for command-line use.

    Removes existing sinks, adds a stderr sink and enables log records from
    the nlsplit package, which the library keeps disabled by default.

    Args:
        verbose: Show INFO messages
        debug: Show DEBUG messages (implies verbose)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
        log_format = (
            "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    elif verbose:
        level = "INFO"
        log_format = "<level>{message}</level>"
    else:
        level = "WARNING"
        log_format = "<level>{level}</level>: {message}"

    logger.add(sys.stderr, level=level, format=log_format, colorize=None)
    logger.enable("nlsplit")
