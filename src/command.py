""" Command to be executed. """


class Command:
    def __init__(self, name, args):
        self.name = name
        self.args = args

    @property
    def argv(self) -> list[str]:
        """ Argument vector for the program; argv[0] is the program name. """
        return [self.name] + self.args

    def __repr__(self):
        return f"Command({self.name!r}, {self.args!r})"
