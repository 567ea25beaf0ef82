"""Key casing policies for INI input."""

from enum import Enum
from typing import Optional

from binit.logger import Logger, get_logger


class Casing(Enum):
    """How composed INI key names are normalised before accumulation."""

    CASE_SENSITIVE = "case-sensitive"
    UPPER = "upper"
    LOWER = "lower"

    def apply(self, key: str) -> str:
        if self is Casing.UPPER:
            return key.upper()
        if self is Casing.LOWER:
            return key.lower()
        return key


_FLAGS = {
    "": Casing.CASE_SENSITIVE,
    "s": Casing.CASE_SENSITIVE,
    "cs": Casing.CASE_SENSITIVE,
    "cased": Casing.CASE_SENSITIVE,
    "case-sensitive": Casing.CASE_SENSITIVE,
    "u": Casing.UPPER,
    "up": Casing.UPPER,
    "upper": Casing.UPPER,
    "l": Casing.LOWER,
    "d": Casing.LOWER,
    "down": Casing.LOWER,
    "lower": Casing.LOWER,
}


def parse_casing(flag: str, logger: Optional[Logger] = None) -> Casing:
    """Map a ``-c`` flag value to a :class:`Casing`.

    Matching ignores case. Unknown values are reported and fall back to
    case-sensitive keys.
    """
    casing = _FLAGS.get(flag.lower())
    if casing is None:
        (logger or get_logger()).warning(
            f'invalid case flag: {flag!r}; using default of "case-sensitive"',
            flag=flag,
        )
        return Casing.CASE_SENSITIVE
    return casing
