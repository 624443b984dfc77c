"""Expression tree of the subcalc language.

Programs are built directly out of these nodes; there is no surface syntax. Written informally, the language is

```
<expr> ::= <number>                              ; Literal       - normal form
         | <name>                                ; Variable      - must be substituted away before evaluation
         | <expr> <op> <expr>                    ; Operation     - op is one of + - * /
         | "let" <name> "=" <expr> "in" <expr>   ; LetIn
         | "fun" <name> "->" <expr>              ; Function      - normal form, single parameter (curry for more)
         | <expr> <expr>                         ; FunctionCall
```

Nodes are frozen dataclasses: they are never mutated, and two nodes are equal if they are structurally equal.
"""

from dataclasses import dataclass

from subcalc.core.operations import Operator, is_number


class Expression:
    """Superclass of every node in a subcalc expression tree."""


def _check_name(name):
    assert isinstance(name, str) and name, f"names must be non-empty strings, got {name!r}"


def _check_expression(*exprs):
    for expr in exprs:
        assert isinstance(expr, Expression), f"expected an expression, got {expr!r}"


@dataclass(frozen=True)
class Literal(Expression):
    value: object

    def __post_init__(self):
        assert is_number(self.value), f"literals must be numbers, got {self.value!r}"


@dataclass(frozen=True)
class Variable(Expression):
    name: str

    def __post_init__(self):
        _check_name(self.name)


@dataclass(frozen=True)
class Operation(Expression):
    left_expr: Expression
    op: Operator
    right_expr: Expression

    def __post_init__(self):
        assert isinstance(self.op, Operator), f"expected an Operator, got {self.op!r}"
        _check_expression(self.left_expr, self.right_expr)


@dataclass(frozen=True)
class LetIn(Expression):
    """Binds name to the value of head_expr inside body_expr (not inside head_expr)."""
    name: str
    head_expr: Expression
    body_expr: Expression

    def __post_init__(self):
        _check_name(self.name)
        _check_expression(self.head_expr, self.body_expr)


@dataclass(frozen=True)
class Function(Expression):
    param: str
    body_expr: Expression

    def __post_init__(self):
        _check_name(self.param)
        _check_expression(self.body_expr)


@dataclass(frozen=True)
class FunctionCall(Expression):
    fun_expr: Expression
    arg_expr: Expression

    def __post_init__(self):
        _check_expression(self.fun_expr, self.arg_expr)
