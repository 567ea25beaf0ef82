"""Wildcard patterns for selecting environment variables by name.

A wildcard is a plain string in which ``*`` matches any run of characters
(including none) and ``?`` matches exactly one character. A backslash makes
the following character literal, so ``a\\*b`` only matches ``a*b``. A trailing
backslash with nothing to escape is itself literal.

Patterns always match the whole name; there is no substring matching.
"""

import re
from typing import Pattern

from binit.exceptions import PatternError

WILDCARD_CHARS = "*?"


def is_wildcard(spec: str) -> bool:
    """Return True if *spec* contains an unescaped or escaped ``*`` or ``?``."""
    return any(c in spec for c in WILDCARD_CHARS)


def translate(pattern: str) -> str:
    """Translate a wildcard pattern into an anchored regular expression."""
    parts = [r"\A"]
    escape = False
    for c in pattern:
        if escape:
            parts.append(re.escape(c))
            escape = False
        elif c == "\\":
            escape = True
        elif c == "*":
            parts.append(".*")
        elif c == "?":
            parts.append(".")
        else:
            parts.append(re.escape(c))

    if escape:
        parts.append(r"\\")

    parts.append(r"\Z")
    return "".join(parts)


def compile_wildcard(pattern: str) -> Pattern[str]:
    """Compile *pattern* into a regular expression matching entire names.

    Raises:
        PatternError: If the translated expression is rejected by ``re``.
    """
    try:
        return re.compile(translate(pattern))
    except re.error as exc:
        raise PatternError(pattern, str(exc)) from exc
