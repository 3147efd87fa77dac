"""Grammar for mscript programs. The grammar parser itself is lark (LALR); this module only defines the rules and
turns lark's errors into ScriptSyntaxErrors.

All grammar can be loosely defined as follows:

```
<program>         ::= (<statement>? ";")* <statement>?
<statement>       ::= <assignment> | <function_call> | <math_expression>
<assignment>      ::= <identifier> "=" <value>
<function_call>   ::= <identifier> "(" (<argument> ("," <argument>)*)? ")"
<argument>        ::= <value>
<value>           ::= <math_expression> | <operand>
<math_expression> ::= <operand> <operator> <value>     ; right-nested: 1 + 2 * 3 = 1 + (2 * 3)
<operand>         ::= <number> | <string> | <identifier> | "(" <math_expression> ")"
```

<value> and <operand> are inlined: they never show up as nodes in the parse tree.
"""

import re

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedInput

from mscript.lang.error import ScriptSyntaxError


GRAMMAR = r"""
program: (statement? ";")* statement?

statement: assignment
         | function_call
         | math_expression

assignment: identifier "=" _value
function_call: identifier "(" (argument ("," argument)*)? ")"
argument: _value

_value: math_expression
      | _operand

math_expression: _operand OPERATOR _value

_operand: number
        | string
        | identifier
        | "(" math_expression ")"

number: NUMBER
string: STRING
identifier: NAME

OPERATOR: "+" | "-" | "*" | "/"
STRING: /"[^"\n]*"/ | /'[^'\n]*'/
COMMENT: /#[^\n]*/

%import common.CNAME -> NAME
%import common.NUMBER
%import common.WS

%ignore WS
%ignore COMMENT
"""

# same shape as the STRING terminal
STRING_LITERAL = re.compile(r"\"[^\"\n]*\"|'[^'\n]*'")

# human readable names for terminals that show up in "expected" sets
TERMINALS = {
    "SEMICOLON": "';'",
    "EQUAL": "'='",
    "LPAR": "'('",
    "RPAR": "')'",
    "COMMA": "','",
    "OPERATOR": "operator",
    "NUMBER": "number",
    "STRING": "string",
    "NAME": "identifier",
    "$END": "end of input",
}

parser = Lark(GRAMMAR, start="program", parser="lalr", propagate_positions=True)


def parse(text):
    """Parses text and returns the `program` node. Raises ScriptSyntaxError if text is not valid mscript."""
    try:
        return parser.parse(text)
    except UnexpectedInput as error:
        line, column = _position(error, text)
        raise ScriptSyntaxError(_describe(error), line, column, _source_line(text, line)) from None


def node_text(node, source=None):
    """Returns the raw program text node was parsed from. Without source, the text is rebuilt from node's tokens."""
    if isinstance(node, Token):
        return str(node)
    if source is not None and not node.meta.empty:
        return source[node.meta.start_pos:node.meta.end_pos]
    return " ".join(str(token) for token in node.scan_values(lambda value: isinstance(value, Token)))


def is_node(node, rule):
    """Whether or not node is a parse tree node built by rule."""
    return isinstance(node, Tree) and node.data == rule


def _describe(error):
    """Short message for a lark UnexpectedInput."""
    if isinstance(error, UnexpectedCharacters):
        return f"unexpected character {error.char!r}"

    token = getattr(error, "token", None)
    if token is None or token.type == "$END":
        found = "end of input"
    else:
        found = repr(str(token))

    expected = sorted(TERMINALS.get(name, name) for name in (getattr(error, "expected", None) or ()))
    if expected:
        return f"unexpected {found}, expected {', '.join(expected)}"
    return f"unexpected {found}"


def _position(error, text):
    """1-based (line, column) of error. Errors at the end of the input point just past its last character."""
    token = getattr(error, "token", None)
    at_end = token is not None and token.type == "$END"

    line, column = getattr(error, "line", -1), getattr(error, "column", -1)
    if at_end or line is None or line < 1 or column is None or column < 1:
        lines = text.split("\n")
        return len(lines), len(lines[-1]) + 1
    return line, column


def _source_line(text, line):
    lines = text.split("\n")
    if 0 < line <= len(lines):
        return lines[line - 1].rstrip("\r")
    return ""
