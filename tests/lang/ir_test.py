import unittest

from lark import Token, Tree

from mscript.lang.error import ScriptSyntaxError, SemanticError
from mscript.lang.ir import Assignment, Function, IRBuilder, build
from mscript.lang.values import MathExpression, Number, Operator, String, Variable


class BuildTestCase(unittest.TestCase):

    def test_demo(self):
        expected = [
            Assignment("x", MathExpression(Number(4.0), Operator.MULTIPLY, Number(2.0))),
            Function("print", (Variable("x"),)),
        ]
        self.assertEqual(expected, build("x=4 * 2;print(x);"))

    def test_program_order(self):
        source = "a = 1;\nprint(a, 'b');\na = \"c\";\nprint();"
        expected = [
            Assignment("a", Number(1.0)),
            Function("print", (Variable("a"), String("b"))),
            Assignment("a", String("c")),
            Function("print", ()),
        ]
        self.assertEqual(expected, build(source))

    def test_skipped_statements(self):
        cases = {
            "": [],
            ";;": [],
            "1 + 2;": [],
            "x + 1;print(x);": [Function("print", (Variable("x"),))],
        }
        for case, result in cases.items():
            self.assertEqual(result, build(case), case)

    def test_unknown_names_are_kept(self):
        # whether a function exists is only known when running
        self.assertEqual([Function("foo", (Number(1.0),))], build("foo(1);"))

    def test_invalid_argument(self):
        with self.assertRaises(SemanticError) as context:
            build("x = 1;\nprint(x, 1e999);")
        error = context.exception
        self.assertEqual("Invalid argument: 1e999 On line: 2", str(error))
        self.assertEqual(2, error.line)
        self.assertEqual("print(x, 1e999);", error.source_line)

    def test_invalid_assignment(self):
        with self.assertRaises(SemanticError) as context:
            build("\n\ny = 2 * 1e999;")
        self.assertEqual("Invalid argument: y On line: 3", str(context.exception))

    def test_syntax_error_before_ir(self):
        self.assertRaises(ScriptSyntaxError, build, "print(1);print((2);")

    def test_str(self):
        statements = build("x=4 * 2;print(x, 'a');")
        self.assertEqual(["Assignment x = (4 * 2)", 'Function print(x, "a")'], [str(stmt) for stmt in statements])


class IRBuilderTestCase(unittest.TestCase):

    def test_degenerate_function_call(self):
        tree = Tree("program", [Tree("statement", [Tree("function_call", [])])])
        self.assertEqual([Function("", ())], IRBuilder("").visit(tree))

    def test_unknown_children_are_skipped(self):
        tree = Tree("program", [
            Token("SEMICOLON", ";"),
            Tree("comment", []),
            Tree("statement", [Tree("import", [])]),
        ])
        self.assertEqual([], IRBuilder("").visit(tree))


if __name__ == '__main__':
    unittest.main()
