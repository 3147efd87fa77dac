"""Session control for mscript. Executes IR against an Environment, either for a whole program file or line by line
in command-line mode.
"""

import logging

from mscript.lang.builtins import call_builtin
from mscript.lang.environment import Environment
from mscript.lang.error import GenericException
from mscript.lang.grammar import STRING_LITERAL
from mscript.lang.ir import Assignment, Function, build


logger = logging.getLogger(__name__)


def execute(statements, environment=None, out=None):
    """Runs statements (IR) in order. Assignments bind unevaluated Values; Functions call builtins with the
    environment as it is at call time. Stops at the first error: statements before it have already taken effect.
    Returns the environment.
    """
    if environment is None:
        environment = Environment()

    for statement in statements:
        logger.debug("executing %s", statement)
        if isinstance(statement, Assignment):
            environment.assign(statement.name, statement.value)
        elif isinstance(statement, Function):
            call_builtin(statement.name, statement.args, environment, out)

    return environment


def run_source(source, out=None):
    """Builds and runs program text source. Returns the environment the program ran in."""
    return execute(build(source), out=out)


class Session:
    """Governs a mscript run: the statements waiting to be executed and the variables assigned so far."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line=False, out=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.out = out            # where builtin output goes (None is sys.stdout)

        self.environment = Environment()
        self.to_exec = []  # IR waiting for run

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    source = file.read()
            except OSError:
                raise GenericException(f"'{path}' could not be opened")

            self.add(source)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, add_to_prev=""):
        """Joins line onto add_to_prev (an unfinished previous line, if any). Returns the joined line and whether or
        not it still needs a continuation because of unbalanced parentheses outside string literals.
        """
        if add_to_prev:
            line = add_to_prev + " " + line
        line = line.rstrip()
        code = STRING_LITERAL.sub("", line)  # parentheses inside string literals do not count
        return line, code.count("(") > code.count(")")

    def add(self, source, line_num=None):
        """Builds IR for source and queues it. Nothing is executed until run is called."""
        if line_num is not None:
            self.error_handler.register_line(self.path, source, line_num)  # in case error is raised

        self.to_exec.extend(build(source))

        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Runs queued statements against this session's environment. Will raise any errors that are encountered. In
        command-line mode, statements are dropped once run (or once they failed) so they are not run twice.
        """
        statements = self.to_exec
        if self.cmd_line:
            self.to_exec = []

        execute(statements, self.environment, self.out)
