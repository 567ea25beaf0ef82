"""Multi-valued accumulation of environment variables.

Every source (command-line assignments, the ambient environment, INI files)
appends into one :class:`Accumulator`. Nothing is ever dropped here; choosing
between repeated values is left to :func:`binit.compiler.compile_env`.

The merge steps are separate functions so that precedence is expressed as
the order in which they run:

- :func:`merge_values` appends every pair unconditionally.
- :func:`merge_literal` appends one named variable if the snapshot has it.
- :func:`merge_imports` resolves import specs; wildcard matches only fill
  keys that are still absent.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from binit.environ import Snapshot
from binit.exceptions import PatternError
from binit.logger import Logger, get_logger
from binit.wildcard import compile_wildcard, is_wildcard


class Accumulator:
    """Ordered multi-map from variable name to the values collected for it.

    A key is only ever created together with its first value, so every key
    present has at least one value.
    """

    def __init__(self) -> None:
        self._values: Dict[str, List[str]] = {}

    def append(self, key: str, value: str) -> None:
        """Append *value* to the values of *key*, creating the key if needed."""
        self._values.setdefault(key, []).append(value)

    def get(self, key: str) -> List[str]:
        """Return a copy of the values collected for *key* (empty if absent)."""
        return list(self._values.get(key, ()))

    def items(self) -> Iterator[tuple[str, List[str]]]:
        for key, values in self._values.items():
            yield key, list(values)

    def keys(self) -> List[str]:
        return list(self._values)

    def to_dict(self) -> Dict[str, List[str]]:
        """Return a deep copy as a plain dict."""
        return {key: list(values) for key, values in self._values.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Accumulator({self._values!r})"


def merge_values(dst: Accumulator, src: Mapping[str, str]) -> None:
    """Append every pair of *src* to *dst*."""
    for key, value in src.items():
        dst.append(key, value)


def merge_literal(dst: Accumulator, src: Snapshot, name: str) -> None:
    """Append ``src[name]`` to *dst* when *src* defines *name*."""
    if name in src:
        dst.append(name, src[name])


def merge_imports(
    dst: Accumulator,
    src: Snapshot,
    specs: Iterable[str],
    logger: Optional[Logger] = None,
) -> None:
    """Import variables named by *specs* from the snapshot *src*.

    Literal specs append the named value. Wildcard specs add every matching
    variable that *dst* does not hold yet, so earlier specs and earlier merges
    win over later wildcard expansion. A wildcard that cannot be compiled is
    reported and retried as a literal name.
    """
    for spec in specs:
        if not is_wildcard(spec):
            merge_literal(dst, src, spec)
            continue

        try:
            pattern = compile_wildcard(spec)
        except PatternError as exc:
            (logger or get_logger()).warning(exc.message, pattern=spec)
            merge_literal(dst, src, spec)
            continue

        for key, value in src.items():
            if key in dst or not pattern.match(key):
                continue
            dst.append(key, value)
