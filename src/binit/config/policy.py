"""Composition policy: how sources are ordered and values are flattened."""

import argparse
from dataclasses import dataclass, field
from typing import Optional

from binit.compiler import DEFAULT_SEPARATOR, resolve_separator
from binit.ini import Casing, parse_casing
from binit.logger import Logger


@dataclass(frozen=True)
class Policy:
    """Immutable bundle of composition switches

    Attributes:
        drop_repeats: Keep a single value per key instead of joining them
        keep_first: Keep the first value rather than the last (implies drop_repeats)
        separator: Decoded string placed between joined values
        config_last: Merge INI files before the environment and assignments
        clean: Do not copy the ambient environment
        key_separator: String placed between INI section names and keys
        casing: Case transform for INI keys
    """

    drop_repeats: bool = False
    keep_first: bool = False
    separator: str = DEFAULT_SEPARATOR
    config_last: bool = False
    clean: bool = False
    key_separator: str = "."
    casing: Casing = field(default=Casing.CASE_SENSITIVE)

    def __post_init__(self) -> None:
        if self.keep_first and not self.drop_repeats:
            object.__setattr__(self, "drop_repeats", True)

    @classmethod
    def from_args(cls, args: argparse.Namespace, logger: Optional[Logger] = None) -> "Policy":
        """Build a policy from parsed command-line arguments.

        The separator is unescaped here; an undecodable separator and an
        unknown casing flag are reported and replaced by safe fallbacks.
        """
        return cls(
            drop_repeats=args.drop_repeats,
            keep_first=args.keep_first,
            separator=resolve_separator(args.separator, logger),
            config_last=args.config_last,
            clean=args.clean,
            key_separator=args.key_separator,
            casing=parse_casing(args.casing, logger),
        )
