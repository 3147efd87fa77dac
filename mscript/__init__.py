"""mscript: a minimal scripting language.

Basic program flow:
    1. Parser: lark turns program text into a parse tree (see mscript/lang/grammar.py for the grammar)
    2. IR: the parse tree is walked once and flattened into Function and Assignment statements, checking that every
       argument and assigned value is a valid Value
    3. Execution: statements are run in order against an Environment of variables, calling builtins (only `print`)
"""

from mscript.lang.environment import Environment
from mscript.lang.error import GenericException, ScriptRuntimeError, ScriptSyntaxError, SemanticError
from mscript.lang.ir import Assignment, Function, build
from mscript.lang.session import Session, execute, run_source
from mscript.lang.values import MathExpression, Number, Operator, String, Value, Variable

__all__ = [
    "Assignment",
    "Environment",
    "Function",
    "GenericException",
    "MathExpression",
    "Number",
    "Operator",
    "ScriptRuntimeError",
    "ScriptSyntaxError",
    "SemanticError",
    "Session",
    "String",
    "Value",
    "Variable",
    "build",
    "execute",
    "run_source",
]
