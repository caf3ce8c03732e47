""" Registry of builtin commands. """
import logging

from exceptions import MalformedBuiltinInvocation, ShellExit

logger = logging.getLogger(__name__)

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("exit")
def builtin_exit(args, state):
    # Extra arguments are accepted and ignored.
    if args:
        logger.debug("exit: ignoring arguments %r", args)
    raise ShellExit(0)


@builtin("set")
def builtin_set(args, state):
    """
    set NAME VALUE

    Defines or replaces a session variable. Arguments after VALUE are ignored.
    """
    if len(args) < 1:
        raise MalformedBuiltinInvocation("set", "missing variable name")
    if len(args) < 2:
        raise MalformedBuiltinInvocation("set", "missing variable value")

    name, value = args[0], args[1]
    state.set_var(name, value)
    return 0


@builtin("vars")
def builtin_vars(args, state):
    if args:
        raise MalformedBuiltinInvocation("vars", "must be called without arguments")

    for name, value in state.enumerate_vars():
        print(f"{name}={value}")
    return 0
