""" Exceptions raised while reading, expanding and running commands. """


class ShellExit(Exception):
    """ Raised to end the session. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """ Base class for errors that only abort the current line. """


class ExpansionError(ShellError):
    pass


class UnterminatedBraceReference(ExpansionError):
    def __init__(self):
        super().__init__("unclosed ${ in variable reference")


class EmptyVariableName(ExpansionError):
    def __init__(self):
        super().__init__("must have variable name after $")


class UndefinedVariable(ExpansionError):
    def __init__(self, name):
        super().__init__(f"variable {name} was not found")
        self.name = name


class MalformedBuiltinInvocation(ShellError):
    """ A builtin was called with the wrong number of arguments. """
    def __init__(self, builtin, message):
        super().__init__(f"{builtin}: {message}")
        self.builtin = builtin


class ExternalProcessCreationFailure(ShellError):
    """ The external program could not be started. """
    def __init__(self, program, message, status):
        super().__init__(f"{program}: {message}")
        self.program = program
        self.status = status


class LineTooLong(ShellError):
    def __init__(self, length, limit):
        super().__init__("line too long")
        self.length = length
        self.limit = limit
