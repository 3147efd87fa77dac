"""Error handling for mscript. Only GenericExceptions should be encountered during running: if another type of error
is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

There are three kinds of GenericException, one per phase of a run:
    1. ScriptSyntaxError: the grammar rejected the program text, nothing was built
    2. SemanticError: a statement's argument or assigned value could not be turned into a Value, nothing was run
    3. ScriptRuntimeError: a statement failed while executing; statements before it have already taken effect
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be reported by ErrorHandler. line and column are 1-based and
    source_line is the text of the offending line (used for the caret diagnosis).
    """

    def __init__(self, msg, line=None, column=None, source_line=None, internal=False):
        super().__init__(msg)
        self.msg = msg
        self.line = line
        self.column = column
        self.source_line = source_line
        self.internal = internal

    def __str__(self):
        return self.msg


class ScriptSyntaxError(GenericException):
    """Raised when the grammar parser rejects program text."""

    def __init__(self, message, line, column, source_line):
        msg = f"on Line: ({line}, {column}) -> Syntax Error: {message} -> {source_line}"
        super().__init__(msg, line, column, source_line)
        self.message = message


class SemanticError(GenericException):
    """Raised while building IR when an argument or assigned value cannot be reduced to a Value."""

    def __init__(self, text, line, column=None, source_line=None):
        super().__init__(f"Invalid argument: {text} On line: {line}", line, column, source_line)
        self.text = text


class ScriptRuntimeError(GenericException):
    """Raised while executing IR: unknown builtin, undefined variable or operand type mismatch."""


class ErrorHandler:
    """Context manager that will report mscript errors instead of letting Python tracebacks through."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error):
        """Returns error.source_line with a caret under error.column."""
        start = max(error.column - 1, 0)

        diagnosis = "  " + error.source_line + "\n"
        diagnosis += "  " + " " * start + colored("^", ErrorHandler.ERROR, attrs=["bold"])
        return diagnosis

    @staticmethod
    def _can_diagnose(error):
        return not error.internal and error.source_line is not None and error.column is not None

    def throw(self, error):
        """Reports error, a GenericException. self.traceback is a dict of path: (line, line_num) representing where
        the offending program text came from.
        """
        error_msg = ""
        for path, (line, line_num) in self.traceback.items():
            if line:
                error_msg += f"  File '{path}', line {line_num}:\n"
                error_msg += f"    {line}\n"

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if ErrorHandler._can_diagnose(error):
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
