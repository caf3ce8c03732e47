import re

# Characters that separate words on a command line.
DELIMITERS = frozenset(" \n")
# A NUL ends the line; anything after it is dropped.
END_OF_LINE = "\0"
REF_CHAR = "$"
VAR_NAME_RX = re.compile(r"[A-Za-z]*")

# Fixed read buffer of the line source; a line filling it is rejected.
MAX_LINE_LENGTH = 1024

PROMPT = "$ "
TRACE_ENV_VAR = "MARY_X"
