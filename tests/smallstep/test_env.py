import pytest

from smallstep.ast import Boolean, Number, StringLiteral
from smallstep.env import Environment
from smallstep.errors import TypeMismatch, UndefinedVariable


def test_lookup_returns_bound_value() -> None:
    env = Environment.of(x=Number(3))
    assert env.lookup("x") == Number(3)
    assert "x" in env
    assert len(env) == 1


def test_lookup_of_unbound_name_raises() -> None:
    with pytest.raises(UndefinedVariable, match="Undefined variable 'y'") as exc:
        Environment().lookup("y")
    assert exc.value.name == "y"


def test_bind_returns_new_environment() -> None:
    env = Environment.of(x=Number(1), y=StringLiteral("a"))
    updated = env.bind("x", Number(2))

    assert env.lookup("x") == Number(1)
    assert updated.lookup("x") == Number(2)
    assert updated.lookup("y") == StringLiteral("a")


def test_bind_rejects_non_storable_values() -> None:
    with pytest.raises(TypeMismatch, match="Cannot store Boolean"):
        Environment().bind("b", Boolean(True))


def test_environment_is_detached_from_source_dict() -> None:
    source = {"x": Number(1)}
    env = Environment(source)
    source["x"] = Number(99)
    assert env.lookup("x") == Number(1)


def test_equal_environments_hash_alike() -> None:
    left = Environment.of(a=Number(1), b=StringLiteral("s"))
    right = Environment.of(b=StringLiteral("s"), a=Number(1))

    assert hash(left) == hash(right)
    assert len({left, right, Environment()}) == 2


def test_environments_compare_by_bindings() -> None:
    assert Environment.of(a=Number(1), b=Number(2)) == Environment.of(
        b=Number(2), a=Number(1)
    )
