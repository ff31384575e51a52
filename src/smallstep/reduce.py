"""One-step reduction rules.

Every rule takes the current environment by reference and never mutates it.
Expressions reduce to an :class:`ExpressionStep`; an assignment whose
right-hand side is already a value reduces to a :class:`StatementDone`
carrying the environment to commit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeAlias

from smallstep.ast import (
    Add,
    Assign,
    BinaryOp,
    Boolean,
    DoNothing,
    Expression,
    LessThan,
    Multiply,
    Number,
    StringLiteral,
    Variable,
    is_reducible,
    is_storable,
)
from smallstep.env import Environment
from smallstep.errors import TypeMismatch


@dataclass(frozen=True)
class ExpressionStep:
    """The expression was rewritten; the environment is unchanged."""

    expression: Expression


@dataclass(frozen=True)
class StatementDone:
    """A statement finished and ``environment`` replaces the current one."""

    environment: Environment


Step: TypeAlias = ExpressionStep | StatementDone


_COMBINE: dict[type[BinaryOp], Callable[[int, int], Expression]] = {
    Add: lambda x, y: Number(x + y),
    Multiply: lambda x, y: Number(x * y),
    LessThan: lambda x, y: Boolean(x < y),
}


def reduce_step(expr: Expression, env: Environment) -> Step:
    """Apply exactly one reduction rule to ``expr``.

    Terminal expressions reduce to themselves.
    """

    match expr:
        case Number() | Boolean() | StringLiteral() | DoNothing():
            return ExpressionStep(expr)
        case Variable(name):
            return ExpressionStep(_lookup(name, env))
        case BinaryOp():
            return ExpressionStep(_reduce_binary(expr, env))
        case Assign(name, rhs) if is_reducible(rhs):
            return ExpressionStep(Assign(name, reduce_expression(rhs, env)))
        case Assign(name, rhs):
            return StatementDone(env.bind(name, rhs))
        case _:
            raise TypeError(f"Unexpected expression in reduce_step: {expr!r}")


def reduce_expression(expr: Expression, env: Environment) -> Expression:
    """One step on an operand, which must stay an expression."""

    step = reduce_step(expr, env)
    if isinstance(step, StatementDone):
        raise TypeMismatch("Statement used where a value is expected", expr)
    return step.expression


def _lookup(name: str, env: Environment) -> Expression:
    value = env.lookup(name)
    if not is_storable(value):
        raise TypeMismatch(f"Variable {name!r} holds a non-value", value)
    return value


def _reduce_binary(expr: BinaryOp, env: Environment) -> Expression:
    left, right = expr.left, expr.right
    if is_reducible(left):
        return type(expr)(reduce_expression(left, env), right)
    if is_reducible(right):
        return type(expr)(left, reduce_expression(right, env))
    match left, right:
        case Number(x), Number(y):
            return _COMBINE[type(expr)](x, y)
        case _:
            raise TypeMismatch(f"{type(expr).__name__} expects Number operands", expr)


def evaluate(expr: Expression, env: Environment | None = None) -> Expression:
    """Reduce an expression to its final value without tracing.

    Statements are not accepted here; use :class:`smallstep.machine.Machine`.
    """

    env = env or Environment()
    while is_reducible(expr):
        expr = reduce_expression(expr, env)
    return expr


__all__ = [
    "ExpressionStep",
    "StatementDone",
    "Step",
    "evaluate",
    "reduce_expression",
    "reduce_step",
]
