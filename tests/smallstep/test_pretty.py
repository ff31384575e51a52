from smallstep.ast import (
    Add,
    Assign,
    Boolean,
    DoNothing,
    LessThan,
    Multiply,
    Number,
    StringLiteral,
    Variable,
    is_reducible,
)
from smallstep.env import Environment
from smallstep.pretty import format_state, pretty, pretty_env


def test_value_rendering() -> None:
    assert pretty(Number(-7)) == "-7"
    assert pretty(Boolean(True)) == "true"
    assert pretty(Boolean(False)) == "false"
    assert pretty(StringLiteral("hello world")) == "hello world"
    assert pretty(DoNothing()) == "do-nothing"


def test_operators_render_flat() -> None:
    term = LessThan(
        Add(Number(5), Multiply(Number(4), Number(4))),
        Add(Number(5), Add(Number(5), Number(6))),
    )
    assert pretty(term) == "5 + 4 * 4 < 5 + 5 + 6"


def test_assignment_and_variable_rendering() -> None:
    assert pretty(Assign("x", Add(Variable("x"), Number(1)))) == "x = x + 1"
    assert str(Variable("y")) == "y"


def test_environment_rendering() -> None:
    env = Environment.of(x=Number(3), s=StringLiteral("hi"))
    assert pretty_env(env) == "{x: 3, s: hi}"
    assert pretty_env(Environment()) == "{}"
    assert str(env) == "{x: 3, s: hi}"


def test_format_state() -> None:
    env = Environment.of(x=Number(2))
    assert format_state(Variable("x"), env) == "x, {x: 2}"
    assert format_state(Variable("x"), env, show_environment=False) == "x"


def test_reducibility() -> None:
    for terminal in (Number(1), Boolean(False), StringLiteral(""), DoNothing()):
        assert not is_reducible(terminal)
    for redex in (
        Variable("x"),
        Add(Number(1), Number(2)),
        Multiply(Number(1), Number(2)),
        LessThan(Number(1), Number(2)),
        Assign("x", Number(1)),
    ):
        assert is_reducible(redex)
