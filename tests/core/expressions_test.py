import dataclasses
import unittest

from subcalc.core.expressions import Function, FunctionCall, LetIn, Literal, Operation, Variable
from subcalc.core.operations import ADD, MUL


class ExpressionTestCase(unittest.TestCase):

    def test_structural_equality(self):
        should_equal = [
            (Literal(10), Literal(10)),
            (Literal(3), Literal(3.0)),
            (Variable("x"), Variable("x")),
            (Operation(Variable("x"), ADD, Literal(1)), Operation(Variable("x"), ADD, Literal(1))),
            (LetIn("x", Literal(1), Variable("x")), LetIn("x", Literal(1), Variable("x"))),
            (Function("x", Variable("x")), Function("x", Variable("x"))),
            (FunctionCall(Function("x", Variable("x")), Literal(2)),
             FunctionCall(Function("x", Variable("x")), Literal(2))),
        ]
        for left, right in should_equal:
            self.assertEqual(left, right)
            self.assertIsNot(left, right)

        should_differ = [
            (Literal(10), Literal(11)),
            (Variable("x"), Variable("y")),
            (Operation(Variable("x"), ADD, Literal(1)), Operation(Variable("x"), MUL, Literal(1))),
            (Function("x", Variable("x")), Function("y", Variable("y"))),
            (LetIn("x", Literal(1), Variable("x")), Function("x", Variable("x"))),
        ]
        for left, right in should_differ:
            self.assertNotEqual(left, right)

    def test_immutable(self):
        cases = [
            (Literal(1), "value", 2),
            (Variable("x"), "name", "y"),
            (LetIn("x", Literal(1), Variable("x")), "body_expr", Literal(2)),
            (Function("x", Variable("x")), "param", "y"),
        ]
        for expr, field, new in cases:
            with self.assertRaises(dataclasses.FrozenInstanceError):
                setattr(expr, field, new)

    def test_hashable(self):
        exprs = {Literal(1), Literal(1), Function("x", Variable("x")), Function("x", Variable("x"))}
        self.assertEqual(2, len(exprs))

    def test_construction_checks(self):
        should_fail = [
            lambda: Literal("10"),
            lambda: Literal(True),
            lambda: Variable(""),
            lambda: Variable(3),
            lambda: Operation(Literal(1), "+", Literal(2)),
            lambda: Operation(1, ADD, Literal(2)),
            lambda: LetIn("x", 1, Variable("x")),
            lambda: Function("", Variable("x")),
            lambda: FunctionCall(Function("x", Variable("x")), 10),
        ]
        for case in should_fail:
            self.assertRaises(AssertionError, case)


if __name__ == '__main__':
    unittest.main()
