""" Current state of the shell. """
import os


class ShellState:
    def __init__(self, trace=False):
        self.vars = {}
        self.trace = trace
        self.last_status = 0

    def set_var(self, name, value):
        self.vars[name] = value

    def get_var(self, name):
        """ Session variables shadow the environment; None if neither has it. """
        if name in self.vars:
            return self.vars[name]
        return os.environ.get(name)

    def enumerate_vars(self) -> list[tuple[str, str]]:
        # Only variables set in this session, never the environment.
        return list(self.vars.items())

    def set_status(self, status: int):
        # normalize like shells do
        self.last_status = int(status) if status is not None else 0
