"""Binary arithmetic operators and the table that applies them to numbers."""

import operator
from enum import Enum
from numbers import Number

from subcalc.lang.error import ArithmeticOverflow, DivisionByZero, InvalidOperand, InvalidOperator


class Operator(Enum):
    """Closed set of operator tags an Operation node may carry."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self):
        return self.value


ADD, SUB, MUL, DIV = Operator


def _divide(left, right):
    """True division, except that ints which divide evenly stay ints."""
    if isinstance(left, int) and isinstance(right, int) and left % right == 0:
        return left // right
    return left / right


_TABLE = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: _divide,
}

assert set(_TABLE) == set(Operator), "every operator needs an entry in the table"


def is_number(value):
    """Whether or not value can be held by a Literal. bools are excluded even though they are ints."""
    return isinstance(value, Number) and not isinstance(value, bool)


def apply(op, left, right):
    """Applies op to left and right. op may be an Operator or its symbol ("+", "-", "*", "/")."""
    try:
        op = Operator(op)
    except ValueError:
        raise InvalidOperator(op) from None

    for operand in (left, right):
        if not is_number(operand):
            raise InvalidOperand(op, operand)

    if op is Operator.DIV and right == 0:
        raise DivisionByZero(op, left)

    try:
        return _TABLE[op](left, right)
    except OverflowError:
        raise ArithmeticOverflow(op, left, right) from None
