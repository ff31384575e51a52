import pytest

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
)
from smallstep.surface.errors import SurfaceError
from smallstep.surface.parse import parse_binding, parse_expression


def test_precedence_and_associativity() -> None:
    assert parse_expression("5 + 4 * 4") == Add(Number(5), Multiply(Number(4), Number(4)))
    assert parse_expression("1 + 2 + 3") == Add(Add(Number(1), Number(2)), Number(3))
    assert parse_expression("(1 + 2) * 3") == Multiply(Add(Number(1), Number(2)), Number(3))


def test_comparison_binds_loosest() -> None:
    assert parse_expression("5 + 4 * 4 < 5 + (5 + 6)") == LessThan(
        Add(Number(5), Multiply(Number(4), Number(4))),
        Add(Number(5), Add(Number(5), Number(6))),
    )


def test_literals() -> None:
    assert parse_expression("-12") == Number(-12)
    assert parse_expression("true") == Boolean(True)
    assert parse_expression("false") == Boolean(False)
    assert parse_expression('"say \\"hi\\""') == StringLiteral('say "hi"')
    assert parse_expression("do-nothing") == DoNothing()
    assert parse_expression("done") == Variable("done")


def test_assignment_statement() -> None:
    assert parse_expression("x = x + 1") == Assign("x", Add(Variable("x"), Number(1)))


def test_chained_comparison_is_rejected() -> None:
    with pytest.raises(SurfaceError, match="Unexpected token"):
        parse_expression("1 < 2 < 3")


def test_unexpected_character() -> None:
    with pytest.raises(SurfaceError, match="Unexpected character '\\$'"):
        parse_expression("1 + $")


def test_unexpected_end_of_input() -> None:
    with pytest.raises(SurfaceError, match="Unexpected end of input"):
        parse_expression("1 +")


def test_error_message_includes_snippet() -> None:
    with pytest.raises(SurfaceError) as exc:
        parse_expression("1 + * 2")
    assert str(exc.value) == "Unexpected token @ 4:5: '*'"


def test_parse_binding() -> None:
    assert parse_binding("x=3") == ("x", Number(3))
    assert parse_binding('s = "hi"') == ("s", StringLiteral("hi"))


def test_parse_binding_rejects_non_values() -> None:
    with pytest.raises(SurfaceError, match="must be a number or a string"):
        parse_binding("x = 1 + 2")
    with pytest.raises(SurfaceError, match="Expected NAME=VALUE"):
        parse_binding("3")
