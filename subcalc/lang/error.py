"""Error handling for subcalc. Only EvaluationErrors should be encountered while evaluating: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class EvaluationError(Exception):
    """Templates an error/warning message so that it can be used to throw a subcalc error/warning. str() gives the plain
    message; self.msg is the same message with the offending snippets highlighted.
    """

    def __init__(self, msg, exprs=None, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending snippet that caused the error
        self.internal = internal

        super().__init__(msg.format(*exprs))


class UnboundVariable(EvaluationError, NameError):
    """A Variable was reached by the evaluator without having been substituted away."""

    def __init__(self, name):
        super().__init__("'{}' is an unbound variable", name)
        self.name = name


class CalleeNotCallable(EvaluationError, TypeError):
    """The callee of a FunctionCall did not evaluate to a Function."""

    def __init__(self, callee):
        super().__init__("'{}' is not a function and cannot be called", repr(callee))
        self.callee = callee


class InvalidOperand(EvaluationError, TypeError):
    """An operand of an arithmetic operation is not a number."""

    def __init__(self, operator, operand):
        super().__init__("'{}' expects numeric operands, got '{}'", [str(operator), repr(operand)])
        self.operator = operator
        self.operand = operand


class InvalidOperator(EvaluationError, ValueError):
    """An operator tag is not one of the supported arithmetic operators."""

    def __init__(self, operator):
        super().__init__("'{}' is not a supported operator", repr(operator))
        self.operator = operator


class DivisionByZero(EvaluationError, ZeroDivisionError):
    """The right operand of a division is zero."""

    def __init__(self, operator, left):
        super().__init__("'{}' divides by zero", f"{left} {operator} 0")
        self.operator = operator
        self.left = left


class ArithmeticOverflow(EvaluationError, OverflowError):
    """The result of an arithmetic operation is too large to represent (ex: an int too large for a float)."""

    def __init__(self, operator, left, right):
        super().__init__("'{}' result is too large to represent", str(operator))
        self.operator = operator
        self.left = left
        self.right = right


class ErrorHandler:
    """Context manager that reports subcalc errors/warnings instead of letting Python tracebacks through. Also records
    the reduction steps of the evaluator it is handed to, which are printed as the traceback of an error.
    """
    ERROR = "red"
    WARNING = "magenta"
    STEP = "cyan"

    TRACEBACK_LIMIT = 10  # number of most recent steps printed with an error

    def __init__(self, fatal=True, verbose=False):
        self.fatal = fatal
        self.verbose = verbose
        self.steps = []

    def register_step(self, kind, expr):
        """Registers a reduction step. kind names the rewrite (ex: "let x"), expr is the expression it produced."""
        self.steps.append((kind, expr))
        if self.verbose:
            print(colored(f"{kind}: ", ErrorHandler.STEP, attrs=["bold"]) + repr(expr))

    def reset(self):
        """Forgets registered steps. Called after an error is reported."""
        self.steps = []

    @staticmethod
    def diagnose(error, warning=False):
        """Returns the offending snippet of error highlighted and underlined."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + colored(error.expr, color, attrs=["bold"]) + "\n"
        diagnosis += "  " + colored("^" + "~" * (len(error.expr) - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args (same signature as EvaluationError)."""
        error = EvaluationError(*args, **kwargs)

        print(colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg)

        if not error.internal and error.expr:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Prints error along with the most recent registered steps. Exits if self.fatal."""
        error_msg = ""
        recent = self.steps[-ErrorHandler.TRACEBACK_LIMIT:]
        if recent:
            error_msg += "Reduction steps (most recent last):\n"
            for kind, expr in recent:
                error_msg += f"  {kind}: {expr!r}\n"

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.reset()  # if error occurred, reset steps (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is None:
            return False
        elif issubclass(exc_type, KeyboardInterrupt):
            self.throw(EvaluationError("keyboard interrupt"))
        elif issubclass(exc_type, SystemExit):
            do_exit = True
        elif issubclass(exc_type, RecursionError):
            self.throw(EvaluationError("normal form might exist, but maximum recursion depth exceeded"))
        elif issubclass(exc_type, EvaluationError):
            self.throw(exc_val)
        else:
            self.throw(EvaluationError("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
