"""Parser for the surface language."""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

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
    is_storable,
)
from smallstep.surface.errors import Span, SurfaceError

_SOURCE: str = ""

reserved = {
    "true": "TRUE",
    "false": "FALSE",
}

tokens = (
    "IDENT",
    "INT",
    "STRING",
    "DO_NOTHING",
    "PLUS",
    "TIMES",
    "LT",
    "EQUALS",
    "LPAREN",
    "RPAREN",
    *tuple(reserved.values()),
)

t_PLUS = r"\+"
t_TIMES = r"\*"
t_LT = r"<"
t_EQUALS = r"="
t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_DO_NOTHING(t: lex.LexToken) -> lex.LexToken:
    r"do-nothing"
    t.end = t.lexpos + len(t.value)
    return t


def t_INT(t: lex.LexToken) -> lex.LexToken:
    r"-?\d+"
    t.end = t.lexpos + len(t.value)
    t.value = int(t.value)
    return t


def t_STRING(t: lex.LexToken) -> lex.LexToken:
    r'"(?:[^"\\\n]|\\.)*"'
    t.end = t.lexpos + len(t.value)
    body = t.value[1:-1]
    t.value = body.replace('\\"', '"').replace("\\\\", "\\")
    return t


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z_][A-Za-z0-9_]*"
    t.type = reserved.get(t.value, "IDENT")
    t.end = t.lexpos + len(t.value)
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise SurfaceError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


precedence = (
    ("nonassoc", "LT"),
    ("left", "PLUS"),
    ("left", "TIMES"),
)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def p_statement_assign(p: yacc.YaccProduction) -> None:
    "statement : IDENT EQUALS expr"
    p[0] = Assign(p[1], p[3])


def p_statement_expr(p: yacc.YaccProduction) -> None:
    "statement : expr"
    p[0] = p[1]


def p_expr_lt(p: yacc.YaccProduction) -> None:
    "expr : expr LT expr"
    p[0] = LessThan(p[1], p[3])


def p_expr_plus(p: yacc.YaccProduction) -> None:
    "expr : expr PLUS expr"
    p[0] = Add(p[1], p[3])


def p_expr_times(p: yacc.YaccProduction) -> None:
    "expr : expr TIMES expr"
    p[0] = Multiply(p[1], p[3])


def p_expr_int(p: yacc.YaccProduction) -> None:
    "expr : INT"
    p[0] = Number(p[1])


def p_expr_true(p: yacc.YaccProduction) -> None:
    "expr : TRUE"
    p[0] = Boolean(True)


def p_expr_false(p: yacc.YaccProduction) -> None:
    "expr : FALSE"
    p[0] = Boolean(False)


def p_expr_string(p: yacc.YaccProduction) -> None:
    "expr : STRING"
    p[0] = StringLiteral(p[1])


def p_expr_var(p: yacc.YaccProduction) -> None:
    "expr : IDENT"
    p[0] = Variable(p[1])


def p_expr_do_nothing(p: yacc.YaccProduction) -> None:
    "expr : DO_NOTHING"
    p[0] = DoNothing()


def p_expr_paren(p: yacc.YaccProduction) -> None:
    "expr : LPAREN expr RPAREN"
    p[0] = p[2]


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise SurfaceError("Unexpected end of input", span, _SOURCE)
    span = _tok_span(cast(lex.LexToken, p))
    raise SurfaceError("Unexpected token", span, _SOURCE)


_PARSER = None


def parse_expression(source: str) -> Expression:
    """Parse a single expression or assignment statement."""
    global _SOURCE, _PARSER
    _SOURCE = source
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(start="statement", debug=False, write_tables=False)
    expr = cast(Expression, _PARSER.parse(source, lexer=lexer))
    if expr is None:
        span = Span(len(source), len(source))
        raise SurfaceError("Unexpected end of input", span, source)
    return expr


def parse_binding(source: str) -> tuple[str, Expression]:
    """Parse ``NAME=VALUE`` where the value is a number or a string."""
    stmt = parse_expression(source)
    match stmt:
        case Assign(name, value) if is_storable(value):
            return name, value
        case Assign():
            raise SurfaceError(
                "Binding value must be a number or a string",
                Span(0, len(source)),
                source,
            )
        case _:
            raise SurfaceError("Expected NAME=VALUE", Span(0, len(source)), source)
