"""Load INI input files into an accumulator.

Input problems never stop the run: an unreadable file is skipped and a file
with a syntax error contributes whatever was decoded before the bad line.
Both are reported through the logger with the offending path.
"""

import sys
from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from binit.accumulator import Accumulator
from binit.exceptions import IniSyntaxError, InputReadError
from binit.ini import IniReader
from binit.logger import Logger, get_logger

STDIN_PATH = "-"


def read_input(path: str, stdin: Optional[BinaryIO] = None) -> bytes:
    """Return the full contents of *path*, or of standard input for ``-``.

    Raises:
        InputReadError: If the file or stream cannot be read.
    """
    try:
        if path == STDIN_PATH:
            stream = stdin if stdin is not None else sys.stdin.buffer
            return stream.read()
        return Path(path).read_bytes()
    except OSError as exc:
        raise InputReadError(path, exc.strerror or str(exc)) from exc


def import_config_file(
    dst: Accumulator,
    path: str,
    reader: IniReader,
    logger: Optional[Logger] = None,
    stdin: Optional[BinaryIO] = None,
) -> bool:
    """Merge the INI file at *path* into *dst*.

    Returns:
        True if the whole file was read and decoded, False if it was skipped
        or only partially merged.
    """
    log = logger or get_logger()

    try:
        data = read_input(path, stdin=stdin)
    except InputReadError as exc:
        log.error(exc.message, path=path)
        return False

    try:
        reader.read(data, dst)
    except IniSyntaxError as exc:
        log.error(f"error parsing INI {path}: {exc.message}", path=path, line=exc.line)
        return False

    log.debug("loaded input file", path=path)
    return True


def import_config_files(
    dst: Accumulator,
    paths: Iterable[str],
    reader: IniReader,
    logger: Optional[Logger] = None,
    stdin: Optional[BinaryIO] = None,
) -> None:
    """Merge each INI file in *paths*, in order."""
    for path in paths:
        import_config_file(dst, path, reader, logger=logger, stdin=stdin)
