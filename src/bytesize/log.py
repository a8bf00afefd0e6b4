"""Loguru setup for the bytesize command line."""

import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - <level>{message}</level>"
)


def setup_logger(verbose: bool = False, log_file=None):
    """Configure loguru sinks.

    The library itself only emits DEBUG records and never adds sinks; this is
    called by the CLI.

    Args:
        verbose: Log DEBUG records to stderr instead of INFO and above
        log_file: Optional path of an additional DEBUG-level log file

    Returns:
        The configured logger
    """
    logger.remove()
    logger.enable("bytesize")
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format=CONSOLE_FORMAT)
    if log_file:
        logger.add(
            log_file,
            level="DEBUG",
            encoding="utf-8",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )
    return logger
