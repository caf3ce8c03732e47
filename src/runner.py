""" Execute a shell command. """
import logging
import subprocess
import sys

from command import Command
from exceptions import ExternalProcessCreationFailure, MalformedBuiltinInvocation
from shell_builtins import BUILTINS
from shell_state import ShellState

logger = logging.getLogger(__name__)


def spawn(argv: list[str]) -> int:
    """ Run an external program and wait for it to finish. """
    name = argv[0]
    try:
        completed = subprocess.run(argv)
    except FileNotFoundError:
        raise ExternalProcessCreationFailure(name, "command not found", 127)
    except PermissionError:
        raise ExternalProcessCreationFailure(name, "permission denied", 126)
    except OSError as e:
        raise ExternalProcessCreationFailure(name, e.strerror or str(e), 126)
    except ValueError as e:
        # e.g. an argument holding a NUL byte
        raise ExternalProcessCreationFailure(name, str(e), 126)

    logger.debug("%s exited with status %d", name, completed.returncode)
    return completed.returncode


def execute_command(cmd: Command, shell_state: ShellState) -> int:
    """
    Run a builtin or an external program and return its exit status.
    ShellExit from the exit builtin propagates to the caller.
    """
    if cmd.name in BUILTINS:
        logger.debug("dispatching builtin %s %r", cmd.name, cmd.args)
        try:
            return BUILTINS[cmd.name](cmd.args, shell_state) or 0
        except MalformedBuiltinInvocation as e:
            print(e, file=sys.stderr)
            return 1

    logger.debug("spawning %r", cmd.argv)
    try:
        return spawn(cmd.argv)
    except ExternalProcessCreationFailure as e:
        print(e, file=sys.stderr)
        return e.status
