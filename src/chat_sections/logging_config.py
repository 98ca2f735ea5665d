"""Logging configuration for chat-sections."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False) -> None:
    """Configure loguru; verbose mode adds timestamps and module names for tracing loads."""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format="{time:HH:mm:ss.SSS} {name}: {message}")
    else:
        logger.add(sys.stderr, level="INFO", format="{level.icon} {message}")
