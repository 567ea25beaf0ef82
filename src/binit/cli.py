"""Command-line entry point for binit.

binit is an env(1)-like tool: it composes an environment from the current
process environment, ``-e`` assignments and INI files, then either prints it
or execs a program with it.

USAGE:
    binit [-i] [-n|-N] [-L] [-e K=V]... [-m NAME]... [-f FILE]... [program [args...]]

EXAMPLES:
    # Run a shell with only the INI values and one extra variable:
    binit -i -e thing.var=value -f config.ini sh -c export

    # Import PATH and every AWS_* variable, nothing else:
    binit -m PATH -m 'AWS_*' -f deploy.ini ./deploy.sh

    # Let config files override the environment, last value wins:
    binit -L -n -f defaults.ini -f local.ini

    # Join repeated keys with a comma:
    binit -i -s , -e Y=a -e Y=b        # prints Y=a,b

ENVIRONMENT VARIABLES (binit's own diagnostics only):
    BINIT_LOG_LEVEL   DEBUG, INFO, WARNING (default), ERROR, CRITICAL
    BINIT_LOG_FORMAT  console (default) or json
    BINIT_LOG_FILE    Also write diagnostics to this file
    BINIT_ENV_FILE    dotenv file providing defaults for the variables above
"""

import argparse
import logging
import sys
from typing import BinaryIO, List, Mapping, Optional, Sequence, TextIO

from binit import __version__
from binit.composer import compose
from binit.config import DEFAULT_PREFIX, LogSettings, Policy
from binit.dispatch import ExecFunction, dispatch
from binit.environ import capture_environment
from binit.logger import Logger, create_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binit",
        description=(
            "Exec a program in an environment composed from the current "
            "environment, command-line assignments and INI files."
        ),
        epilog="With no program, the composed environment is printed one KEY=VALUE per line.",
    )

    parser.add_argument(
        "-e",
        dest="assignments",
        action="append",
        default=[],
        metavar="K=V",
        help="Set an environment variable. Repeatable.",
    )
    parser.add_argument(
        "-f",
        dest="inputs",
        action="append",
        default=[],
        metavar="FILE",
        help="INI file to load into the environment (- reads standard input). Repeatable.",
    )
    parser.add_argument(
        "-m",
        dest="imports",
        action="append",
        default=[],
        metavar="NAME",
        help="Import a variable, or every variable matching a */? wildcard, "
        "from the environment. Implies -i. Repeatable.",
    )
    parser.add_argument(
        "-i",
        dest="clean",
        action="store_true",
        help="Omit current environment variables.",
    )
    parser.add_argument(
        "-n",
        dest="drop_repeats",
        action="store_true",
        help="Keep only the last-set value of each variable.",
    )
    parser.add_argument(
        "-N",
        dest="keep_first",
        action="store_true",
        help="Keep first values instead of last (implies -n).",
    )
    parser.add_argument(
        "-s",
        dest="separator",
        default=" ",
        metavar="SEP",
        help="Separator inserted between values of multi-value variables. "
        "Backslash escapes are decoded; may be quoted. Write a separator starting "
        "with - as -s=-x or -s-x. (default: space)",
    )
    parser.add_argument(
        "-S",
        dest="key_separator",
        default=".",
        metavar="SEP",
        help="Separator inserted between INI section names and keys. (default: .)",
    )
    parser.add_argument(
        "-c",
        dest="casing",
        default="s",
        metavar="CASE",
        help="Case transform for INI keys: s=case-sensitive, u=uppercase, d=lowercase. (default: s)",
    )
    parser.add_argument(
        "-L",
        dest="config_last",
        action="store_true",
        help="Give config file values precedence over values from the environment.",
    )
    parser.add_argument(
        "-v",
        dest="verbose",
        action="store_true",
        help="Log debug diagnostics to standard error.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        metavar="program [args...]",
        help="Program to exec with the composed environment.",
    )
    return parser


def setup_logger(environ: Mapping[str, str], verbose: bool = False) -> Logger:
    """Create the diagnostics logger from BINIT_* settings."""
    problem = None
    try:
        settings = LogSettings.from_env(
            prefix=DEFAULT_PREFIX,
            env_file=environ.get(f"{DEFAULT_PREFIX}_ENV_FILE"),
            environ=environ,
        )
    except ValueError as exc:
        settings = LogSettings()
        problem = str(exc)

    logger = create_logger(
        name="binit",
        level=logging.DEBUG if verbose else settings.level_number,
        log_file=settings.log_file or "",
        json_format=settings.json_format,
    )
    if problem:
        logger.warning(f"ignoring log settings: {problem}")
    return logger


def _command(args: argparse.Namespace) -> List[str]:
    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]
    return command


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
    exec_fn: Optional[ExecFunction] = None,
) -> int:
    """Run binit and return its exit status.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        environ: Ambient environment (default: os.environ)
        stdin: Binary stream read for ``-f -`` (default: sys.stdin.buffer)
        stdout: Stream for print mode (default: sys.stdout)
        exec_fn: Replacement for os.execve
    """
    args = build_parser().parse_args(argv)

    snapshot = capture_environment(environ)
    logger = setup_logger(snapshot, verbose=args.verbose)
    policy = Policy.from_args(args, logger)

    env = compose(
        snapshot,
        policy,
        assignments=args.assignments,
        imports=args.imports,
        inputs=args.inputs,
        logger=logger,
        stdin=stdin,
    )

    return dispatch(_command(args), env, logger=logger, output=stdout, exec_fn=exec_fn)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
