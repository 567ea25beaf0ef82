"""binit - exec programs in an environment composed from several sources.

This package provides:
- environ: read-only snapshots of the process environment
- wildcard: */? name patterns for selective imports
- accumulator: multi-valued merging with explicit precedence steps
- ini: INI decoding into flat group.key names
- importer: loading INI files and standard input
- compiler: flattening to sorted KEY=VALUE strings
- composer: the end-to-end composition pipeline
- dispatch: printing or exec-ing the result
"""

__version__ = "1.0.0"

from binit.accumulator import Accumulator, merge_imports, merge_literal, merge_values
from binit.compiler import compile_env, unescape_separator
from binit.composer import accumulate, compose
from binit.config import LogSettings, Policy
from binit.environ import Snapshot, capture_environment, parse_environ
from binit.exceptions import (
    BinitError,
    ExecError,
    IniSyntaxError,
    InputReadError,
    PatternError,
    SeparatorError,
)
from binit.ini import Casing, IniReader
from binit.logger import Logger, create_logger, get_logger
from binit.wildcard import compile_wildcard, is_wildcard

__all__ = [
    "__version__",
    # Snapshot
    "Snapshot",
    "capture_environment",
    "parse_environ",
    # Wildcards
    "compile_wildcard",
    "is_wildcard",
    # Accumulation
    "Accumulator",
    "merge_values",
    "merge_literal",
    "merge_imports",
    # INI
    "Casing",
    "IniReader",
    # Compilation
    "compile_env",
    "unescape_separator",
    "accumulate",
    "compose",
    # Config
    "Policy",
    "LogSettings",
    # Logger
    "Logger",
    "create_logger",
    "get_logger",
    # Exceptions
    "BinitError",
    "PatternError",
    "SeparatorError",
    "IniSyntaxError",
    "InputReadError",
    "ExecError",
]
