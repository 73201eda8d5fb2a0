"""
Logging utilities for the motifkit library.

Provides a package logger and helper functions for consistent logging.
The library itself only attaches a NullHandler; applications opt in with
configure_logging().
"""

import logging
import sys
from typing import Optional


# Default format for motifkit logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "motifkit"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, usually the calling module's __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the motifkit library.

    Args:
        level: Logging level (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            format_string or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )
    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the motifkit library."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all motifkit logging."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


def log_search(logger: logging.Logger, operation: str, **context) -> None:
    """Log a completed search with its size/result context at DEBUG level."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        logger.debug(f"{operation} complete ({ctx_str})")
    else:
        logger.debug(f"{operation} complete")


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
