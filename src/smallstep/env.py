from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from smallstep.ast import Expression, is_storable
from smallstep.errors import TypeMismatch, UndefinedVariable


@dataclass(frozen=True)
class Environment:
    """
    Immutable store of variable bindings.

    Notes:
        - Values are expected to be terminal (``Number`` or ``StringLiteral``).
        - ``bind`` never mutates; it returns a new environment, so an
          environment handed to a reduction rule is safe to share.
    """

    bindings: Mapping[str, Expression] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        # Detach from the caller's dict so later edits there are not seen here.
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    @staticmethod
    def of(**bindings: Expression) -> Environment:
        return Environment(bindings)

    # ---- lookup ----
    def lookup(self, name: str) -> Expression:
        """Return the value bound to ``name``; raise if unbound."""
        try:
            return self.bindings[name]
        except KeyError:
            raise UndefinedVariable(name) from None

    def get(self, name: str) -> Expression | None:
        return self.bindings.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def items(self):
        return self.bindings.items()

    # ---- extending the environment ----
    def bind(self, name: str, value: Expression) -> Environment:
        """
        Return a copy of this environment with ``name`` bound to ``value``.

        An existing binding for ``name`` is overwritten; all others are kept.
        """
        if not is_storable(value):
            raise TypeMismatch(
                f"Cannot store {type(value).__name__} in variable {name!r}", value
            )
        return Environment({**self.bindings, name: value})

    def __hash__(self) -> int:
        return hash(frozenset(self.bindings.items()))

    def __str__(self) -> str:
        from smallstep.pretty import pretty_env

        return pretty_env(self)
