"""Base exception classes for binit.

All binit exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for locating the cause (path, pattern, line)
"""

from typing import Any, Dict, Optional


class BinitError(Exception):
    """Base exception for all binit errors.

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_PATTERN")
        message: Human-readable error message
        details: Optional additional context for diagnostics
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code (e.g., "INVALID_PATTERN")
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class PatternError(BinitError):
    """Raised when a wildcard import cannot be compiled to a matcher."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(
            code="INVALID_PATTERN",
            message=f"unable to compile pattern-like import {pattern!r}: {reason}",
            details={"pattern": pattern},
        )
        self.pattern = pattern


class SeparatorError(BinitError):
    """Raised when an escaped separator string cannot be decoded."""

    def __init__(self, raw: str, reason: str):
        super().__init__(
            code="INVALID_SEPARATOR",
            message=f"unable to unquote separator {raw!r}: {reason}",
            details={"separator": raw},
        )
        self.raw = raw


class IniSyntaxError(BinitError):
    """Raised by the INI decoder on malformed input.

    Values decoded before the failing line have already been delivered
    to the destination by the time this is raised.
    """

    def __init__(self, line: int, reason: str):
        super().__init__(
            code="INI_SYNTAX",
            message=f"line {line}: {reason}",
            details={"line": line},
        )
        self.line = line


class InputReadError(BinitError):
    """Raised when an input file (or standard input) cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code="INPUT_READ",
            message=f"error reading <{path}>: {reason}",
            details={"path": path},
        )
        self.path = path


class ExecError(BinitError):
    """Raised when the target program cannot be located or executed.

    The exit_code attribute carries the process exit status the CLI
    terminates with (127 not found, 126 exec failed, 1 exec returned).
    """

    def __init__(self, message: str, exit_code: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="EXEC_FAILED", message=message, details=details)
        self.exit_code = exit_code
