"""Intermediate representation of mscript programs. Building IR is the only thing that looks at lark's parse tree:
everything downstream (Session, builtins) works on the flat list of statements produced here.

There are two kinds of statement:

```
Function(name, args)     ; call of a builtin with a list of Values
Assignment(name, value)  ; bind a Value to a variable name
```

A bare math expression used as a statement produces no IR, and neither does any other kind of statement.
"""

import logging
from dataclasses import dataclass

from lark import Tree
from lark.visitors import Interpreter

from mscript.lang.error import SemanticError
from mscript.lang.grammar import is_node, node_text, parse
from mscript.lang.values import Value


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Function:
    name: str
    args: tuple

    def __str__(self):
        return f"Function {self.name}({', '.join(str(arg) for arg in self.args)})"


@dataclass(frozen=True)
class Assignment:
    name: str
    value: Value

    def __str__(self):
        return f"Assignment {self.name} = {self.value}"


class IRBuilder(Interpreter):
    """Walks a `program` node and collects its statements as IR, in source order."""

    def __init__(self, source):
        self.source = source
        self.statements = []

    def program(self, tree):
        for child in tree.children:
            if is_node(child, "statement"):
                self.visit(child)
        return self.statements

    def statement(self, tree):
        for child in tree.children:
            if isinstance(child, Tree):
                self.visit(child)

    def function_call(self, tree):
        if not tree.children:
            self._emit(Function("", ()))
            return

        name_node, *arg_nodes = tree.children
        args = []
        for arg_node in arg_nodes:
            value = Value.parse(_unwrap(arg_node))
            if value is None:
                raise self._invalid(node_text(arg_node, self.source), tree)
            args.append(value)

        self._emit(Function(node_text(name_node), tuple(args)))

    def assignment(self, tree):
        name_node, value_node = tree.children
        name = node_text(name_node)

        value = Value.parse(value_node)
        if value is None:
            raise self._invalid(name, tree)

        self._emit(Assignment(name, value))

    def math_expression(self, tree):
        logger.debug("skipping bare expression statement on line %s", tree.meta.line)

    def __default__(self, tree):
        logger.debug("skipping '%s' statement", tree.data)

    def _emit(self, statement):
        logger.debug("built %s", statement)
        self.statements.append(statement)

    def _invalid(self, text, tree):
        line = tree.meta.line
        return SemanticError(text, line, tree.meta.column, _line_of(self.source, line))


def _unwrap(node):
    """Returns the single value node inside an `argument` node."""
    if is_node(node, "argument") and len(node.children) == 1:
        return node.children[0]
    return None


def _line_of(source, line):
    lines = source.split("\n")
    return lines[line - 1] if 0 < line <= len(lines) else None


def build(source):
    """Parses source and returns its IR: a list of Function and Assignment statements in program order. Raises
    ScriptSyntaxError if source cannot be parsed and SemanticError if a value in it is invalid.
    """
    return IRBuilder(source).visit(parse(source))
