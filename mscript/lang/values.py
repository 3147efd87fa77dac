"""Runtime values for mscript. A Value is one of

```
Number(float)                           ; numeric literal or computed result
String(text)                            ; string literal, quote characters removed
Variable(name)                          ; reference into the Environment, resolved when evaluated
MathExpression(left, operator, right)   ; binary expression, left and right are Values themselves
```

Values are immutable: evaluating one never changes it, it only produces the final text of the value.

Note that operand resolution is deliberately shallow for most operators. Add looks through a Variable on its left,
and with a String on the left it evaluates its right operand fully (so variables and nested expressions work there),
but Number + <x> only accepts an immediate Number or String, and Subtract/Multiply/Divide only accept immediate
Numbers on both sides. `x = 2; print(3 - x);` is therefore an error, not 1.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from mscript.lang.error import ScriptRuntimeError
from mscript.lang.grammar import is_node


def format_number(number):
    """Decimal text of number: integral values have no fractional part, nothing is written with an exponent."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = repr(number)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def divide(dividend, divisor):
    """IEEE-754 division: dividing by zero gives an infinity (or NaN for 0 / 0) instead of raising."""
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


class Operator(Enum):
    """Binary operators of math expressions."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def parse(cls, text):
        """Returns the Operator spelled text, or None if there is no such operator."""
        try:
            return cls(str(text))
        except ValueError:
            return None

    def run(self, left, right, environment):
        """Applies this operator to the Values left and right. Returns the result's text."""
        if self is Operator.ADD:
            left = _resolve(left, environment)
            if isinstance(left, Number):
                if isinstance(right, Number):
                    return format_number(left.value + right.value)
                if isinstance(right, String):
                    return format_number(left.value) + right.value
            elif isinstance(left, String):
                return left.value + right.evaluate(environment)
            raise self._mismatch(left, right)

        if not isinstance(left, Number) or not isinstance(right, Number):
            raise self._mismatch(left, right)

        if self is Operator.SUBTRACT:
            return format_number(left.value - right.value)
        if self is Operator.MULTIPLY:
            return format_number(left.value * right.value)
        return format_number(divide(left.value, right.value))

    def _mismatch(self, left, right):
        return ScriptRuntimeError(f"unsupported operand types for {self.value}: {left.kind} and {right.kind}")

    def __str__(self):
        return self.value


def _resolve(value, environment):
    """Follows value through the environment while it is a Variable."""
    if isinstance(value, Variable):
        return _resolve(environment.lookup(value.name), environment)
    return value


class Value(ABC):
    """Superclass for every runtime value."""
    kind = "value"

    @staticmethod
    def parse(node):
        """Builds the Value for a `number`, `string`, `math_expression` or `identifier` parse tree node. Returns None
        if node is any other kind of node or does not hold a valid value.
        """
        if is_node(node, "number"):
            return Number.parse(node)
        if is_node(node, "string"):
            return String.parse(node)
        if is_node(node, "math_expression"):
            return MathExpression.parse(node)
        if is_node(node, "identifier"):
            return Variable.parse(node)
        return None

    @abstractmethod
    def evaluate(self, environment):
        """Reduces this value to its final text, looking variables up in environment."""


@dataclass(frozen=True)
class Number(Value):
    value: float
    kind = "number"

    @staticmethod
    def parse(node):
        if not node.children:
            return None
        try:
            value = float(node.children[0])
        except ValueError:
            return None
        return Number(value) if math.isfinite(value) else None

    def evaluate(self, environment):
        return format_number(self.value)

    def __str__(self):
        return format_number(self.value)


@dataclass(frozen=True)
class String(Value):
    value: str
    kind = "string"

    @staticmethod
    def parse(node):
        if not node.children:
            return None
        return String(str(node.children[0]).replace('"', "").replace("'", ""))

    def evaluate(self, environment):
        return self.value

    def __str__(self):
        return f'"{self.value}"'


@dataclass(frozen=True)
class Variable(Value):
    name: str
    kind = "variable"

    @staticmethod
    def parse(node):
        if not node.children:
            return None
        return Variable(str(node.children[0]))

    def evaluate(self, environment):
        # no cycle protection: `x = x` recurses until RecursionError
        return environment.lookup(self.name).evaluate(environment)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class MathExpression(Value):
    left: Value
    operator: Operator
    right: Value
    kind = "math expression"

    @staticmethod
    def parse(node):
        if len(node.children) != 3:
            return None
        left_node, operator_token, right_node = node.children

        left = Value.parse(left_node)
        operator = Operator.parse(operator_token)
        if left is None or operator is None:
            return None

        right = Value.parse(right_node)
        if right is None:
            return None
        return MathExpression(left, operator, right)

    def evaluate(self, environment):
        return self.operator.run(self.left, self.right, environment)

    def __str__(self):
        return f"({self.left} {self.operator} {self.right})"
