"""Expression nodes for the small-step evaluator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Expression:
    """Base class for all expression nodes."""

    # --- Display --------------------------------------------------------------
    def __str__(self) -> str:
        # Deferred import avoids cycles when pretty-printing dataclass reprs.
        from smallstep.pretty import pretty

        return pretty(self)


# --- Values ------------------------------------------------------------------


@dataclass(frozen=True)
class Number(Expression):
    value: int


@dataclass(frozen=True)
class Boolean(Expression):
    value: bool


@dataclass(frozen=True)
class StringLiteral(Expression):
    value: str


@dataclass(frozen=True)
class DoNothing(Expression):
    """The statement that has nothing left to do."""


# --- Reducible nodes ---------------------------------------------------------


@dataclass(frozen=True)
class Variable(Expression):
    name: str


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Shared shape of the left-to-right binary operators."""

    left: Expression
    right: Expression


@dataclass(frozen=True)
class Add(BinaryOp):
    pass


@dataclass(frozen=True)
class Multiply(BinaryOp):
    pass


@dataclass(frozen=True)
class LessThan(BinaryOp):
    pass


@dataclass(frozen=True)
class Assign(Expression):
    """Statement binding ``name`` to the value of ``expression``."""

    name: str
    expression: Expression


def is_reducible(expr: Expression) -> bool:
    """Return ``True`` when ``expr`` has at least one pending rewrite."""

    match expr:
        case Number() | Boolean() | StringLiteral() | DoNothing():
            return False
        case Variable() | Add() | Multiply() | LessThan() | Assign():
            return True
        case _:
            raise TypeError(f"Unexpected expression in is_reducible: {expr!r}")


def is_storable(expr: Expression) -> bool:
    """Values that may be held in an environment."""

    return isinstance(expr, (Number, StringLiteral))


__all__ = [
    "Add",
    "Assign",
    "BinaryOp",
    "Boolean",
    "DoNothing",
    "Expression",
    "LessThan",
    "Multiply",
    "Number",
    "StringLiteral",
    "Variable",
    "is_reducible",
    "is_storable",
]
