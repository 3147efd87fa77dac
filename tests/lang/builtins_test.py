import io
import unittest

from mscript.lang.builtins import BUILTINS, builtin_print, call_builtin
from mscript.lang.environment import Environment
from mscript.lang.error import ScriptRuntimeError
from mscript.lang.values import MathExpression, Number, Operator, String, Variable


class BuiltinsTestCase(unittest.TestCase):

    def setUp(self):
        self.env = Environment({"x": Number(2.0)})
        self.out = io.StringIO()

    def test_registry(self):
        self.assertEqual(["print"], list(BUILTINS))
        self.assertIs(builtin_print, BUILTINS["print"])

    def test_print(self):
        args = (Number(1.0), String("a"), Variable("x"), MathExpression(Number(3.0), Operator.DIVIDE, Number(2.0)))
        call_builtin("print", args, self.env, self.out)
        self.assertEqual("1\na\n2\n1.5\n", self.out.getvalue())

    def test_print_stops_at_first_failure(self):
        args = (String("first"), Variable("missing"), String("never"))
        self.assertRaises(ScriptRuntimeError, call_builtin, "print", args, self.env, self.out)
        self.assertEqual("first\n", self.out.getvalue())

    def test_unknown(self):
        for name in ["", "Print", "input", "len"]:
            with self.assertRaises(ScriptRuntimeError) as context:
                call_builtin(name, (), self.env, self.out)
            self.assertEqual(f"unknown function '{name}'", str(context.exception))
        self.assertEqual("", self.out.getvalue())


if __name__ == '__main__':
    unittest.main()
