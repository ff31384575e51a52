"""Abstract machine driving reduction to a fixed point."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from smallstep.ast import DoNothing, Expression, is_reducible
from smallstep.env import Environment
from smallstep.errors import MachineFailed, ReductionError
from smallstep.pretty import format_state
from smallstep.reduce import ExpressionStep, StatementDone, reduce_step

logger = logging.getLogger(__name__)


class MachineState(enum.Enum):
    RUNNING = "running"
    HALTED = "halted"


@dataclass(frozen=True)
class TraceEntry:
    """Snapshot of the machine between two steps."""

    expression: Expression
    environment: Environment

    def __str__(self) -> str:
        return format_state(self.expression, self.environment)


class Machine:
    """Small-step machine over an expression and an environment.

    ``step`` performs a single reduction. ``run`` prints every intermediate
    state, steps until the expression is terminal and prints the final state.
    Any reduction error is fatal: the machine keeps the state it had before
    the failing step and refuses to advance afterwards.
    """

    def __init__(
        self,
        expression: Expression,
        environment: Environment | None = None,
        *,
        show_environment: bool = True,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.expression = expression
        self.environment = environment if environment is not None else Environment()
        self.show_environment = show_environment
        self.echo = echo
        self.steps_taken = 0
        self.failure: ReductionError | None = None

    @property
    def state(self) -> MachineState:
        if is_reducible(self.expression):
            return MachineState.RUNNING
        return MachineState.HALTED

    def step(self) -> None:
        """Perform exactly one transition.

        On a halted machine the terminal expression reduces to itself.
        """
        self._check_not_failed()
        try:
            result = reduce_step(self.expression, self.environment)
        except ReductionError as e:
            logger.debug("Step %d failed: %s", self.steps_taken + 1, e)
            self.failure = e
            raise

        match result:
            case ExpressionStep(expression):
                self.expression = expression
            case StatementDone(environment):
                logger.debug("Committing environment %s", environment)
                self.expression = DoNothing()
                self.environment = environment
        self.steps_taken += 1
        logger.debug("Step %d: %s", self.steps_taken, self.expression)

    def trace(self) -> Iterator[TraceEntry]:
        """Yield every state up to and including the terminal one."""
        self._check_not_failed()
        while self.state is MachineState.RUNNING:
            yield TraceEntry(self.expression, self.environment)
            self.step()
        yield TraceEntry(self.expression, self.environment)

    def run(self) -> Expression:
        for entry in self.trace():
            self.echo(
                format_state(
                    entry.expression,
                    entry.environment,
                    show_environment=self.show_environment,
                )
            )
        return self.expression

    def _check_not_failed(self) -> None:
        if self.failure is not None:
            raise MachineFailed(self.failure) from self.failure
