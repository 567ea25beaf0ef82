"""
Default logger implementation.

A dependency-free logger that writes one formatted line per message to a
stream (stderr unless told otherwise). Used where the stdlib logging tree
should stay untouched, e.g. when binit is embedded as a library.
"""

import sys
import uuid
from datetime import datetime, timezone
from typing import Any, TextIO

from .interface import Logger

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


class DefaultLogger(Logger):
    """Plain-text logger with session tracking and a minimum level.

    Example:
        logger = DefaultLogger(level="DEBUG")
        logger.warning("error reading input", path="missing.ini")
    """

    def __init__(
        self,
        name: str = "binit",
        output: TextIO = sys.stderr,
        include_timestamp: bool = True,
        level: str = "DEBUG",
    ):
        """Initialize the default logger.

        Args:
            name: Logger name (prefix of every line)
            output: Output stream (default: stderr)
            include_timestamp: Whether to include timestamps in log messages
            level: Minimum level name that is written
        """
        self._name = name
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._include_timestamp = include_timestamp
        self._threshold = _LEVELS.get(level.upper(), _LEVELS["DEBUG"])

    def get_session_id(self) -> str:
        """Get the current session ID."""
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        parts = []

        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat())

        parts.append(f"[{level}]")
        parts.append(f"{self._name}:")
        parts.append(message)

        if kwargs:
            extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
            parts.append(f"({extra})")

        return " ".join(parts)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _LEVELS[level] < self._threshold:
            return
        formatted = self._format_message(level, message, **kwargs)
        print(formatted, file=self._output, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""
        self._log("CRITICAL", message, **kwargs)
