"""Logging configuration for addressbook using loguru."""

import sys
from typing import Optional

from loguru import logger


def setup_logger(
    log_level: str = "WARNING",
    console_output: bool = True,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure loguru with console and optional file output.

    Enables records from the addressbook package, which are disabled on import.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to output to stderr
        log_file: Path to a log file, or None for no file output
    """
    # Remove default handler
    logger.remove()

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_file:
        logger.add(
            log_file,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            encoding="utf-8",
        )

    logger.enable("addressbook")


def get_logger():
    """
    Get the shared logger instance.

    Records carry the calling module in ``{name}``, which both sink formats print.

    Returns:
        Logger instance
    """
    return logger
