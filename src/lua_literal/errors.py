"""Exceptions raised by lua_literal."""

from __future__ import annotations


class LuaLiteralError(Exception):
    """Base class for conversion failures.

    ``kind`` names the offending Python type or syntax-tree node kind,
    ``reason`` a short machine-readable cause.
    """

    def __init__(self, message: str, *, kind: str | None = None, reason: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.reason = reason


class FormatError(LuaLiteralError):
    """A value cannot be rendered as Lua."""


class ParseError(LuaLiteralError):
    """Lua source cannot be reduced to a value."""
