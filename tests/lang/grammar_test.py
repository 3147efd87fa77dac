import unittest

from mscript.lang.error import ScriptSyntaxError
from mscript.lang.grammar import is_node, node_text, parse


class ParseTestCase(unittest.TestCase):

    def test_program(self):
        tree = parse("x=4 * 2;print(x);")
        self.assertTrue(is_node(tree, "program"))
        self.assertEqual(["statement", "statement"], [child.data for child in tree.children])

        kinds = [statement.children[0].data for statement in tree.children]
        self.assertEqual(["assignment", "function_call"], kinds)

    def test_statement_kinds(self):
        cases = {
            "x = 1": "assignment",
            "print(1, 'a')": "function_call",
            "1 + 2": "math_expression",
            "y = 'a' + x;": "assignment",
        }
        for case, result in cases.items():
            statement, = parse(case).children
            self.assertEqual(result, statement.children[0].data, case)

    def test_function_call_shape(self):
        statement, = parse("print(1, 'a', x, 1 + 2);").children
        function_call, = statement.children

        name, *args = function_call.children
        self.assertTrue(is_node(name, "identifier"))
        self.assertEqual(["argument"] * 4, [arg.data for arg in args])
        self.assertEqual(["number", "string", "identifier", "math_expression"], [arg.children[0].data for arg in args])

    def test_empty_programs(self):
        for case in ["", "   ", ";", ";;", "# just a comment\n"]:
            self.assertEqual([], parse(case).children, repr(case))

    def test_comments_and_whitespace(self):
        tree = parse("# assign\nx = 1;  # trailing\n\n  print( x ) ;")
        self.assertEqual(2, len(tree.children))

    def test_positions(self):
        tree = parse("x = 1;\n\nprint(x);")
        lines = [statement.children[0].meta.line for statement in tree.children]
        self.assertEqual([1, 3], lines)


class SyntaxErrorTestCase(unittest.TestCase):

    def test_should_raise(self):
        should_raise = ["print((1);", "print(1", "x = ;", "x = 4 $ 2;", "print(1 2);", "= 1;", "x = 'open;", "1 +;"]
        for case in should_raise:
            self.assertRaises(ScriptSyntaxError, parse, case)

    def test_position(self):
        with self.assertRaises(ScriptSyntaxError) as context:
            parse("x = 1;\nprint(x;\nprint(2);")
        error = context.exception
        self.assertEqual((2, 8), (error.line, error.column))
        self.assertEqual("print(x;", error.source_line)
        self.assertTrue(str(error).startswith("on Line: (2, 8) -> Syntax Error: "), str(error))
        self.assertTrue(str(error).endswith(" -> print(x;"), str(error))

    def test_unexpected_character(self):
        with self.assertRaises(ScriptSyntaxError) as context:
            parse("x = 4 $ 2;")
        error = context.exception
        self.assertEqual((1, 7), (error.line, error.column))
        self.assertIn("'$'", error.message)

    def test_end_of_input(self):
        with self.assertRaises(ScriptSyntaxError) as context:
            parse("print(1")
        error = context.exception
        self.assertEqual((1, 8), (error.line, error.column))
        self.assertIn("end of input", error.message)


class NodeTextTestCase(unittest.TestCase):

    def test_node_text(self):
        source = "print(1 +  2, 'a');"
        statement, = parse(source).children
        function_call, = statement.children
        name, first, second = function_call.children

        self.assertEqual("print", node_text(name))
        self.assertEqual("print", node_text(name, source))
        self.assertEqual("1 +  2", node_text(first, source))
        self.assertEqual("1 + 2", node_text(first))
        self.assertEqual("'a'", node_text(second, source))
        self.assertEqual("print", node_text(name.children[0]))


if __name__ == '__main__':
    unittest.main()
