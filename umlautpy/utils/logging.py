"""Logger setup built on loguru."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the global loguru logger.

    Removes the default handler and installs a single stderr sink whose level
    follows the flags: DEBUG with ``debug``, INFO with ``verbose``, WARNING
    otherwise.

    Args:
        verbose: Emit informational messages
        debug: Emit debug messages (implies verbose)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
        fmt = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {name}:{line} - {message}"
    elif verbose:
        level = "INFO"
        fmt = "{message}"
    else:
        level = "WARNING"
        fmt = "<level>{message}</level>"

    logger.add(sys.stderr, level=level, format=fmt, colorize=None)
