"""Substitution of values for names in expression trees.

substitute(value, name, expr) replaces every free occurrence of Variable(name) in expr with value and returns the new
tree. Binders shadow: a LetIn binding the same name keeps its body untouched. Note that there is no alpha conversion, so
a value whose own free variables get captured by a binder in expr is substituted as-is.

Function bodies are never entered here, only at application (see evaluation.py). A Function sitting inside a larger
expression therefore keeps any free occurrence of name.
"""

from subcalc.core.expressions import FunctionCall, LetIn, Operation
from subcalc.core.variants import Variant, variant_of


def _sub_literal(value, name, expr):
    return expr


def _sub_variable(value, name, expr):
    return value if expr.name == name else expr


def _sub_operation(value, name, expr):
    return Operation(
        substitute(value, name, expr.left_expr),
        expr.op,
        substitute(value, name, expr.right_expr),
    )


def _sub_let_in(value, name, expr):
    # name is not in scope within head_expr, so the head is always substituted
    return LetIn(
        expr.name,
        substitute(value, name, expr.head_expr),
        expr.body_expr if expr.name == name else substitute(value, name, expr.body_expr),  # shadow
    )


def _sub_function(value, name, expr):
    return expr


def _sub_function_call(value, name, expr):
    return FunctionCall(
        substitute(value, name, expr.fun_expr),
        substitute(value, name, expr.arg_expr),
    )


_SUBSTITUTIONS = {
    Variant.LITERAL: _sub_literal,
    Variant.VARIABLE: _sub_variable,
    Variant.OPERATION: _sub_operation,
    Variant.LET_IN: _sub_let_in,
    Variant.FUNCTION: _sub_function,
    Variant.FUNCTION_CALL: _sub_function_call,
}

assert set(_SUBSTITUTIONS) == set(Variant), "every variant needs a substitution rule"


def substitute(value, name, expr):
    """Returns expr with every free occurrence of Variable(name) replaced by value."""
    return _SUBSTITUTIONS[variant_of(expr)](value, name, expr)


def free_variables(expr):
    """Returns the frozenset of names occurring free in expr, with Functions binding their parameter in their body.
    Unlike substitute, this does look inside Function bodies.
    """
    variant = variant_of(expr)

    if variant is Variant.LITERAL:
        return frozenset()
    elif variant is Variant.VARIABLE:
        return frozenset([expr.name])
    elif variant is Variant.OPERATION:
        return free_variables(expr.left_expr) | free_variables(expr.right_expr)
    elif variant is Variant.LET_IN:
        return free_variables(expr.head_expr) | (free_variables(expr.body_expr) - {expr.name})
    elif variant is Variant.FUNCTION:
        return free_variables(expr.body_expr) - {expr.param}
    return free_variables(expr.fun_expr) | free_variables(expr.arg_expr)
