""" Substitute $name and ${name} references inside words. """
from constants import REF_CHAR, VAR_NAME_RX
from exceptions import EmptyVariableName, UndefinedVariable, UnterminatedBraceReference
from shell_state import ShellState


def _read_reference(token: str, i: int) -> tuple[str, int]:
    """
    Parse the reference whose '$' sits at token[i].
    Returns the variable name and the index just past the reference.
    """
    i += 1
    if i < len(token) and token[i] == "{":
        end = token.find("}", i + 1)
        if end == -1:
            raise UnterminatedBraceReference()
        return token[i + 1:end], end + 1

    # VAR_NAME_RX accepts an empty run; that case is rejected by the caller.
    m = VAR_NAME_RX.match(token, i)
    return m.group(), m.end()


def expand_word(token: str, state: ShellState) -> str:
    result = ""
    i = 0
    n = len(token)

    while i < n:
        if token[i] != REF_CHAR:
            result += token[i]
            i += 1
            continue

        name, i = _read_reference(token, i)
        if not name:
            raise EmptyVariableName()

        value = state.get_var(name)
        if value is None:
            raise UndefinedVariable(name)
        # Values are spliced in as-is, never expanded again.
        result += value

    return result


def expand_words(tokens: list[str], state: ShellState) -> list[str]:
    """ Expand every word in order; the first failure aborts the whole line. """
    return [expand_word(tok, state) for tok in tokens]
