""" Lexical analysis for shell commands. """
from constants import DELIMITERS, END_OF_LINE


def tokenize(line: str) -> list[str]:
    """
    Split a line into words on spaces and newlines.
    Runs of delimiters count as one; no quoting or escaping is recognised.
    A NUL character ends the line.
    """
    tokens = []
    current = ""

    for ch in line:
        if ch == END_OF_LINE:
            break
        if ch in DELIMITERS:
            if current:
                tokens.append(current)
                current = ""
        else:
            current += ch

    if current:
        tokens.append(current)
    return tokens
