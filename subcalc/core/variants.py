"""Tells expression variants apart. substitution and evaluation dispatch on Variant rather than on node classes."""

from enum import Enum

from subcalc.core.expressions import Function, FunctionCall, LetIn, Literal, Operation, Variable
from subcalc.lang.error import EvaluationError


class Variant(Enum):
    LITERAL = Literal
    VARIABLE = Variable
    OPERATION = Operation
    LET_IN = LetIn
    FUNCTION = Function
    FUNCTION_CALL = FunctionCall


_BY_CLASS = {variant.value: variant for variant in Variant}


def variant_of(expr):
    """Returns the Variant of expr. Raises an internal EvaluationError if expr is not an expression node."""
    try:
        return _BY_CLASS[type(expr)]
    except KeyError:
        raise EvaluationError("'{}' is not an expression", repr(expr), internal=True) from None


def is_literal(expr):
    return variant_of(expr) is Variant.LITERAL


def is_variable(expr):
    return variant_of(expr) is Variant.VARIABLE


def is_operation(expr):
    return variant_of(expr) is Variant.OPERATION


def is_let_in(expr):
    return variant_of(expr) is Variant.LET_IN


def is_function(expr):
    return variant_of(expr) is Variant.FUNCTION


def is_function_call(expr):
    return variant_of(expr) is Variant.FUNCTION_CALL


def is_normal_form(expr):
    """Literals and Functions are the only expressions evaluation does not reduce further."""
    return variant_of(expr) in (Variant.LITERAL, Variant.FUNCTION)
