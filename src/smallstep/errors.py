"""Runtime errors raised while reducing expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smallstep.ast import Expression


@dataclass
class ReductionError(Exception):
    """A reduction rule could not be applied. Always fatal."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UndefinedVariable(ReductionError):
    name: str

    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined variable {name!r}")
        self.name = name


@dataclass
class TypeMismatch(ReductionError):
    expression: Expression | None = None

    def __str__(self) -> str:
        if self.expression is None:
            return self.message
        return f"{self.message}:\n  term = {self.expression}"


@dataclass
class MachineFailed(Exception):
    """A machine that has already failed was asked to continue."""

    cause: ReductionError

    def __str__(self) -> str:
        return f"Machine halted on an earlier error: {self.cause}"
