"""Common exceptions for binit.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from binit.exceptions import (
        BinitError,
        PatternError,
        SeparatorError,
        IniSyntaxError,
        InputReadError,
        ExecError,
    )
"""

from binit.exceptions.base import (
    BinitError,
    ExecError,
    IniSyntaxError,
    InputReadError,
    PatternError,
    SeparatorError,
)

__all__ = [
    "BinitError",
    "PatternError",
    "SeparatorError",
    "IniSyntaxError",
    "InputReadError",
    "ExecError",
]
