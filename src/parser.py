""" Parse shell commands. """
from command import Command
from expander import expand_words
from shell_state import ShellState


def parse_command_line(tokens: list[str], state: ShellState) -> Command|None:
    """
    Expand the words of one line and build the command to run.
    Returns None for an empty line. Expansion errors propagate.
    """
    if not tokens:
        return None

    words = expand_words(tokens, state)
    return Command(words[0], words[1:])
