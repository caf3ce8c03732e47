""" Implement the core of the shell. """
import logging
import sys

from constants import MAX_LINE_LENGTH, PROMPT
from exceptions import LineTooLong, ShellError, ShellExit
from lexer import tokenize
from parser import parse_command_line
from runner import execute_command
from shell_state import ShellState

logger = logging.getLogger(__name__)


def read_command(prompt=PROMPT):
    """ Read one line; raises EOFError at end of input. """
    return input(prompt)


def check_line_length(line: str):
    """
    Reject lines that would fill the fixed read buffer.

    input() strips the newline and gives no way to tell whether one was
    read, so one byte is always counted for it. A final unterminated line
    of exactly MAX_LINE_LENGTH - 1 bytes is therefore rejected too.
    """
    length = len(line.encode("utf-8", errors="surrogateescape")) + 1
    if length >= MAX_LINE_LENGTH:
        raise LineTooLong(length, MAX_LINE_LENGTH)


def print_trace(words: list[str]):
    print("+" + "".join(f" {w}" for w in words))


class Shell:
    def __init__(self, state=None):
        self.state = state if state is not None else ShellState()

    def process_line(self, line: str):
        """ Tokenize, expand and run one line. Errors propagate to run(). """
        check_line_length(line)
        tokens = tokenize(line)

        cmd = parse_command_line(tokens, self.state)
        if cmd is None:
            return

        if self.state.trace:
            print_trace(cmd.argv)

        status = execute_command(cmd, self.state)
        self.state.set_status(status)

    def run(self):
        while True:
            try:
                line = read_command()
                self.process_line(line)
            except ShellError as e:
                logger.debug("line aborted: %r", e)
                print(f"error: {e}", file=sys.stderr)
                self.state.set_status(1)

            except ShellExit as e:
                return e.status

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()

            except MemoryError:
                print("failed to allocate", file=sys.stderr)
                return 1
