"""Small-step evaluator facade: expressions, environments and the machine."""

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
    is_reducible,
)
from smallstep.env import Environment
from smallstep.errors import MachineFailed, ReductionError, TypeMismatch, UndefinedVariable
from smallstep.machine import Machine, MachineState, TraceEntry
from smallstep.reduce import ExpressionStep, StatementDone, evaluate, reduce_step

__all__ = [
    "Add",
    "Assign",
    "Boolean",
    "DoNothing",
    "Environment",
    "Expression",
    "ExpressionStep",
    "LessThan",
    "Machine",
    "MachineFailed",
    "MachineState",
    "Multiply",
    "Number",
    "ReductionError",
    "StatementDone",
    "StringLiteral",
    "TraceEntry",
    "TypeMismatch",
    "UndefinedVariable",
    "Variable",
    "evaluate",
    "is_reducible",
    "reduce_step",
]
