"""Pretty-printing for expressions and environments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from smallstep.ast import (
    Add,
    Assign,
    Boolean,
    DoNothing,
    Expression,
    LessThan,
    Multiply,
    Number,
    StringLiteral,
    Variable,
)

if TYPE_CHECKING:
    from smallstep.env import Environment


def pretty(expr: Expression) -> str:
    """Render ``expr`` the way it appears in a reduction trace.

    Operators are printed flat, without parentheses, so ``5 + (4 * 4)``
    renders as ``5 + 4 * 4``.
    """

    match expr:
        case Number(value):
            return str(value)
        case Boolean(value):
            return "true" if value else "false"
        case StringLiteral(value):
            return value
        case DoNothing():
            return "do-nothing"
        case Variable(name):
            return name
        case Add(left, right):
            return f"{pretty(left)} + {pretty(right)}"
        case Multiply(left, right):
            return f"{pretty(left)} * {pretty(right)}"
        case LessThan(left, right):
            return f"{pretty(left)} < {pretty(right)}"
        case Assign(name, expression):
            return f"{name} = {pretty(expression)}"
        case _:
            raise TypeError(f"Unexpected expression in pretty: {expr!r}")


def pretty_env(env: Environment) -> str:
    bindings = ", ".join(f"{name}: {pretty(value)}" for name, value in env.items())
    return "{" + bindings + "}"


def format_state(
    expr: Expression, env: Environment, *, show_environment: bool = True
) -> str:
    """One line of trace output."""

    if not show_environment:
        return pretty(expr)
    return f"{pretty(expr)}, {pretty_env(env)}"
