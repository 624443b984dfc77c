"""Eager, substitution-based evaluation of subcalc expressions.

Evaluation reduces an expression to a normal form (a Literal or a Function). There is no environment: a LetIn evaluates
its head, substitutes the result into its body and evaluates that; a FunctionCall evaluates callee and argument, then
substitutes the argument into the callee's body and evaluates that. Partial application falls out of the same rule,
since a body that is itself a Function is returned as-is once its outer parameter has been substituted.

Example (curried addition applied to one argument):
    (fun x -> fun y -> x + y) 2
    -> substitute 2 for x in (fun y -> x + y)
    -> fun y -> 2 + y
"""

from subcalc.core.expressions import Function, Literal
from subcalc.core.operations import apply
from subcalc.core.substitution import free_variables, substitute
from subcalc.core.variants import Variant, is_function, is_literal, variant_of
from subcalc.lang.error import CalleeNotCallable, InvalidOperand, UnboundVariable


def substitute_into_body(value, name, body):
    """Substitutes value for name in the body of an applied function. Unlike substitute, this enters a body that is
    itself a Function (so curried functions receive their arguments one at a time), stopping when a parameter
    shadows name.
    """
    if is_function(body):
        if body.param == name:
            return body
        return Function(body.param, substitute_into_body(value, name, body.body_expr))
    return substitute(value, name, body)


class Evaluator:
    """Reduces expressions to normal form. If an error_handler is given, every rewrite is registered with it as a step,
    which is what an ErrorHandler prints as the traceback of an error.
    """

    def __init__(self, error_handler=None):
        self.error_handler = error_handler

    def evaluate(self, expr):
        """Returns the normal form of expr. Raises an EvaluationError if expr has none."""
        return Evaluator._RULES[variant_of(expr)](self, expr)

    def _register_step(self, kind, expr):
        if self.error_handler is not None:
            self.error_handler.register_step(kind, expr)

    def _literal(self, expr):
        return expr

    def _variable(self, expr):
        raise UnboundVariable(expr.name)

    def _operand(self, expr, op):
        """Evaluates one side of an operation, which must reduce to a Literal."""
        result = self.evaluate(expr)
        if not is_literal(result):
            raise InvalidOperand(op, result)
        return result

    def _operation(self, expr):
        left = self._operand(expr.left_expr, expr.op)
        right = self._operand(expr.right_expr, expr.op)
        return Literal(apply(expr.op, left.value, right.value))

    def _let_in(self, expr):
        value = self.evaluate(expr.head_expr)
        body = substitute(value, expr.name, expr.body_expr)
        self._register_step(f"let {expr.name}", body)
        return self.evaluate(body)

    def _function(self, expr):
        return expr

    def _function_call(self, expr):
        function = self.evaluate(expr.fun_expr)
        if not is_function(function):
            raise CalleeNotCallable(function)

        arg = self.evaluate(expr.arg_expr)  # call-by-value
        body = substitute_into_body(arg, function.param, function.body_expr)
        self._register_step(f"call {function.param}", body)
        return self.evaluate(body)

    _RULES = {
        Variant.LITERAL: _literal,
        Variant.VARIABLE: _variable,
        Variant.OPERATION: _operation,
        Variant.LET_IN: _let_in,
        Variant.FUNCTION: _function,
        Variant.FUNCTION_CALL: _function_call,
    }

    assert set(_RULES) == set(Variant), "every variant needs an evaluation rule"


def evaluate(expr, error_handler=None):
    """Evaluates expr to a normal form. With an error_handler, steps are registered with it and a warning is emitted if
    the result is a Function that still refers to variables bound outside of it (substitution does not reach into
    unapplied function bodies, so such variables stay unbound).
    """
    result = Evaluator(error_handler).evaluate(expr)

    if error_handler is not None and is_function(result):
        unreached = free_variables(result)
        if unreached:
            names = ", ".join(sorted(unreached))
            error_handler.warn("function of '{}' refers to unbound '{}'", [result.param, names])

    return result
