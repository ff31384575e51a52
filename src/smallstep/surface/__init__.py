"""Textual front end: build expressions from source text."""

from smallstep.surface.errors import Span, SurfaceError
from smallstep.surface.parse import parse_binding, parse_expression

__all__ = ["Span", "SurfaceError", "parse_binding", "parse_expression"]
