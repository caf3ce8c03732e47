""" Command-line entry point for marysh. """
import argparse
import logging
import os
import sys

from constants import TRACE_ENV_VAR
from shell import Shell
from shell_state import ShellState


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="marysh",
        description="A minimal interactive shell with $name and ${name} variables"
    )
    parser.add_argument(
        "-x", "--trace",
        action="store_true",
        help=f"echo each expanded command prefixed by '+' (also {TRACE_ENV_VAR}=1)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="log dispatch details to stderr"
    )
    return parser.parse_args(argv)


def build_state(args, environ=None) -> ShellState:
    if environ is None:
        environ = os.environ
    trace = args.trace or environ.get(TRACE_ENV_VAR) == "1"
    return ShellState(trace=trace)


def setup_logging(debug=False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(asctime)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.debug)

    sh = Shell(build_state(args))
    rc = sh.run()
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
