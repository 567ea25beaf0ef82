"""
binit Logger Module

Diagnostics for the composition engine. Everything goes to stderr so that
print mode can write the composed environment to stdout untouched.

Usage:
    from binit.logger import get_logger, create_logger

    logger = get_logger()
    logger.warning("error reading input", path="app.ini")

    logger = create_logger(level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_FORMAT: "console" (default) or "json"

    Where {PREFIX} is derived from the logger name ("binit" -> "BINIT")
"""

import logging
import os
from typing import Dict, Optional

from .default_logger import DefaultLogger
from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "binit" -> "BINIT"
        "binit-test" -> "BINIT_TEST"
    """
    return name.upper().replace("-", "_")


# Most recently created logger per name, reused by get_logger
_loggers: Dict[str, Logger] = {}


def create_logger(
    name: str = "binit",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters left as None are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_FORMAT. The result replaces any
    earlier logger of the same name returned by :func:`get_logger`.

    Args:
        name: Logger name
        level: Logging level (defaults to WARNING or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = os.environ.get(f"{env_prefix}_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_str, logging.WARNING)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_FORMAT", "console").lower() == "json"

    logger = StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )
    _loggers[name] = logger
    return logger


def get_logger(name: str = "binit") -> Logger:
    """Return the logger last created for *name*, creating one from the environment if needed."""
    logger = _loggers.get(name)
    if logger is None:
        logger = create_logger(name=name)
    return logger


__all__ = [
    # Interface
    "Logger",
    # Implementations
    "DefaultLogger",
    "StructuredLogger",
    # Formatters
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "get_logger",
]
