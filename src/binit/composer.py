"""Compose the final environment from all sources.

:func:`compose` is a pure function of its arguments: the ambient
environment arrives as a snapshot and INI input is read through the
importer, so the same inputs always give the same sorted output.

Source order::

    default:      assignments, environment, INI files
    config_last:  INI files, assignments, environment

With keep-last flattening, whichever group merges later wins.
"""

from typing import BinaryIO, Optional, Sequence

from binit.accumulator import Accumulator, merge_imports, merge_values
from binit.compiler import compile_env
from binit.config import Policy
from binit.environ import Snapshot, split_pair
from binit.importer import import_config_files
from binit.ini import IniReader
from binit.logger import Logger, get_logger


def merge_environment(
    dst: Accumulator,
    snapshot: Snapshot,
    assignments: Sequence[str],
    imports: Sequence[str],
    clean: bool,
    logger: Optional[Logger] = None,
) -> None:
    """Append command-line assignments in order, then the ambient environment.

    Repeated assignments of one name each add a value. The whole snapshot is copied unless *clean* is set or explicit *imports*
    are given, in which case only the imported variables are copied.
    """
    for pair in assignments:
        dst.append(*split_pair(pair))

    if not clean and not imports:
        merge_values(dst, snapshot)
    else:
        merge_imports(dst, snapshot, imports, logger=logger)


def accumulate(
    snapshot: Snapshot,
    policy: Policy,
    assignments: Sequence[str] = (),
    imports: Sequence[str] = (),
    inputs: Sequence[str] = (),
    logger: Optional[Logger] = None,
    stdin: Optional[BinaryIO] = None,
) -> Accumulator:
    """Collect every value from every source into a new accumulator."""
    log = logger or get_logger()
    values = Accumulator()
    reader = IniReader(separator=policy.key_separator, casing=policy.casing)

    if not policy.config_last:
        merge_environment(values, snapshot, assignments, imports, policy.clean, log)

    import_config_files(values, inputs, reader, logger=log, stdin=stdin)

    if policy.config_last:
        merge_environment(values, snapshot, assignments, imports, policy.clean, log)

    log.debug("accumulated environment", keys=len(values))
    return values


def compose(
    snapshot: Snapshot,
    policy: Policy,
    assignments: Sequence[str] = (),
    imports: Sequence[str] = (),
    inputs: Sequence[str] = (),
    logger: Optional[Logger] = None,
    stdin: Optional[BinaryIO] = None,
) -> list[str]:
    """Return the sorted ``KEY=VALUE`` list for the given sources and policy."""
    values = accumulate(
        snapshot,
        policy,
        assignments=assignments,
        imports=imports,
        inputs=inputs,
        logger=logger,
        stdin=stdin,
    )
    return compile_env(values, policy.drop_repeats, policy.keep_first, policy.separator)
