"""Snapshots of the process environment.

A snapshot is a read-only ``name -> value`` mapping captured once at startup.
Composition code receives it as an argument instead of reading
``os.environ`` itself, which keeps composition a pure function of its inputs.
"""

import os
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

Snapshot = Mapping[str, str]


def split_pair(pair: str) -> tuple[str, str]:
    """Split ``NAME=VALUE`` on the first ``=``; a bare name has an empty value."""
    name, sep, value = pair.partition("=")
    if not sep:
        return pair, ""
    return name, value


def parse_environ(pairs: Iterable[str]) -> Snapshot:
    """Build a snapshot from ``NAME=VALUE`` strings.

    Values may contain ``=``; only the first one separates the name. When a
    name repeats, the later pair wins.
    """
    env: dict[str, str] = {}
    for pair in pairs:
        name, value = split_pair(pair)
        env[name] = value
    return MappingProxyType(env)


def capture_environment(environ: Optional[Mapping[str, str]] = None) -> Snapshot:
    """Snapshot *environ* (``os.environ`` by default) into a read-only mapping."""
    source = os.environ if environ is None else environ
    return MappingProxyType(dict(source))
