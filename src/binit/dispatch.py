"""Print the composed environment or replace this process with a program.

Exit codes follow env(1):

    0    printed the environment
    127  the program could not be found
    126  the program was found but could not be executed
    1    the exec call returned instead of replacing the process
"""

import os
import shutil
import sys
from typing import Callable, Iterable, Mapping, NoReturn, Optional, Sequence, TextIO

from binit.exceptions import ExecError
from binit.logger import Logger, get_logger

EXIT_OK = 0
EXIT_EXEC_RETURNED = 1
EXIT_EXEC_FAILED = 126
EXIT_NOT_FOUND = 127

ExecFunction = Callable[[str, Sequence[str], Mapping[str, str]], object]


def print_env(env: Iterable[str], output: Optional[TextIO] = None) -> int:
    """Write one ``KEY=VALUE`` line per entry to *output* (stdout by default).

    Without an explicit *output* the pairs go to the binary stdout through
    ``os.fsencode``, so values that arrived as undecodable bytes are written
    back unchanged.
    """
    if output is None and hasattr(sys.stdout, "buffer"):
        sys.stdout.flush()
        raw = sys.stdout.buffer
        for pair in env:
            raw.write(os.fsencode(pair) + b"\n")
        raw.flush()
        return EXIT_OK

    out = output if output is not None else sys.stdout
    for pair in env:
        out.write(pair + "\n")
    out.flush()
    return EXIT_OK


def split_env(env: Iterable[str]) -> dict[str, str]:
    """Turn serialized ``KEY=VALUE`` strings into the mapping ``execve`` takes."""
    result: dict[str, str] = {}
    for pair in env:
        key, _, value = pair.partition("=")
        result[key] = value
    return result


def drop_unnamed(env: Iterable[str], logger: Logger) -> list[str]:
    """Remove pairs with an empty name; ``execve`` rejects them."""
    kept = []
    for pair in env:
        if pair.startswith("="):
            logger.warning("dropping variable with empty name", pair=pair)
            continue
        kept.append(pair)
    return kept


def find_program(name: str, path: Optional[str] = None) -> str:
    """Locate *name* on the search path; names containing ``/`` are used as is.

    Raises:
        ExecError: With exit code 127 if no executable is found.
    """
    found = shutil.which(name, path=path)
    if found is None:
        raise ExecError(
            f"exec: {name!r}: executable file not found in $PATH",
            exit_code=EXIT_NOT_FOUND,
            details={"program": name},
        )
    return found


def exec_program(
    argv: Sequence[str],
    env: Iterable[str],
    exec_fn: Optional[ExecFunction] = None,
    path: Optional[str] = None,
) -> NoReturn:
    """Replace the current process with ``argv[0]`` running under *env*.

    The search for the program uses the PATH of binit itself (or *path*), not
    the composed environment.

    Raises:
        ExecError: With the exit code the caller should terminate with.
    """
    program = find_program(argv[0], path=path)
    args = [program, *argv[1:]]
    run = exec_fn if exec_fn is not None else os.execve

    try:
        run(program, args, split_env(env))
    except (OSError, ValueError) as exc:
        raise ExecError(
            f"error exec-ing to <{program}>: {exc}",
            exit_code=EXIT_EXEC_FAILED,
            details={"program": program},
        ) from exc

    raise ExecError(
        "exec failed, process still running",
        exit_code=EXIT_EXEC_RETURNED,
        details={"program": program},
    )


def dispatch(
    argv: Sequence[str],
    env: Sequence[str],
    logger: Optional[Logger] = None,
    output: Optional[TextIO] = None,
    exec_fn: Optional[ExecFunction] = None,
) -> int:
    """Print *env* when *argv* is empty, otherwise exec *argv* with it.

    Returns the exit status; on a successful exec this never returns.
    """
    if not argv:
        return print_env(env, output)

    log = logger or get_logger()
    try:
        exec_program(argv, drop_unnamed(env, log), exec_fn=exec_fn)
    except ExecError as exc:
        log.error(exc.message, exit_code=exc.exit_code)
        return exc.exit_code
