"""Flatten accumulated values into ``KEY=VALUE`` strings."""

from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from binit.accumulator import Accumulator
from binit.escapes import decode_escapes, unquote
from binit.exceptions import SeparatorError
from binit.logger import Logger, get_logger

DEFAULT_SEPARATOR = " "


def unescape_separator(raw: str) -> str:
    """Decode a join separator given on the command line.

    A separator starting with ``"`` or ``'`` must be a complete quoted string;
    one starting with a backtick is a raw string. Anything else is decoded as
    the body of a double-quoted string, so ``\\t`` is a tab, a bare ``"`` is
    kept as is and ``\\'`` is rejected.

    Raises:
        SeparatorError: If the separator is not a valid escaped string.
    """
    if not raw:
        return raw

    try:
        if raw[0] in "\"'`":
            return unquote(raw)
        return decode_escapes(raw, '"')
    except ValueError as exc:
        raise SeparatorError(raw, str(exc)) from exc


def compile_pair(key: str, values: Sequence[str], drop_repeats: bool, keep_first: bool, sep: str) -> str:
    if drop_repeats:
        value = values[0] if keep_first else values[-1]
    else:
        value = sep.join(values)
    return f"{key}={value}"


def compile_env(
    values: Union[Accumulator, Mapping[str, Sequence[str]]],
    drop_repeats: bool = False,
    keep_first: bool = False,
    sep: str = DEFAULT_SEPARATOR,
) -> List[str]:
    """Collapse *values* into one sorted ``KEY=VALUE`` string per key.

    With *drop_repeats* only the last value (or the first, with *keep_first*)
    of each key survives; otherwise all values are joined with *sep*.

    The result is sorted on the whole ``KEY=VALUE`` string, not on the key,
    so ``A0=x`` comes before ``A=x``.
    """
    items: Iterable[Tuple[str, Sequence[str]]] = values.items()
    env = [compile_pair(key, vals, drop_repeats, keep_first, sep) for key, vals in items]
    env.sort()
    return env


def resolve_separator(raw: Optional[str], logger: Optional[Logger] = None) -> str:
    """Decode *raw* with :func:`unescape_separator`, keeping *raw* on failure."""
    if raw is None:
        return DEFAULT_SEPARATOR
    try:
        return unescape_separator(raw)
    except SeparatorError as exc:
        (logger or get_logger()).warning(exc.message, separator=raw)
        return raw
