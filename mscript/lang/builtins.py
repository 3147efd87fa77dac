"""Builtin functions of mscript. The set is closed: there is no way to define functions from program text."""

import sys

from mscript.lang.error import ScriptRuntimeError


def builtin_print(args, environment, out=None):
    """Evaluates each argument in order and writes it on its own line. Lines written before a failing argument stay
    written.
    """
    out = out if out is not None else sys.stdout
    for arg in args:
        print(arg.evaluate(environment), file=out)


BUILTINS = {
    "print": builtin_print,
}


def call_builtin(name, args, environment, out=None):
    """Calls the builtin called name with args (a sequence of Values). Raises ScriptRuntimeError for unknown names."""
    try:
        function = BUILTINS[name]
    except KeyError:
        raise ScriptRuntimeError(f"unknown function '{name}'") from None
    return function(args, environment, out)
