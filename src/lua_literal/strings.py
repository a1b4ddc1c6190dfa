"""Lua string literals, keywords and table keys."""

from __future__ import annotations

import math
import re

from .errors import FormatError
from .values import Key, is_number


LUA_KEYWORDS = frozenset({
    "and", "break", "do", "else", "elseif", "end", "false", "for",
    "function", "goto", "if", "in", "local", "nil", "not", "or",
    "repeat", "return", "then", "true", "until", "while",
})

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_SENTINEL_KEYS = {None: "[nil]", True: "[true]", False: "[false]"}


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def is_identifier(name: str) -> bool:
    """True if *name* can be written as a bare Lua field name."""
    return _IDENTIFIER_RE.fullmatch(name) is not None and name not in LUA_KEYWORDS


def format_number(number: int | float) -> str:
    if isinstance(number, float):
        if not math.isfinite(number):
            raise FormatError(
                f"can't format non-finite number {number!r}",
                kind="float",
                reason="unsupported type",
            )
        return repr(number)
    return str(number)


def quote_string(string: str, single_quote: bool = True, multiline: bool = False) -> str:
    """Render *string* as a Lua literal.

    Backslashes are always doubled. Long-bracket strings get no other
    escaping, so their content must neither contain ``]]`` nor end
    with ``]``.
    """
    string = string.replace("\\", "\\\\")
    if multiline:
        if "]]" in string or string.endswith("]"):
            raise FormatError(
                "multiline string can't include ']]' or end with ']'",
                kind="string",
                reason="syntax conflict",
            )
        return f"[[{string}]]"
    string = string.replace("\n", "\\n").replace("\r", "\\r")
    if single_quote:
        return "'" + string.replace("'", "\\'") + "'"
    return '"' + string.replace('"', '\\"') + '"'


def format_key(key: Key, single_quote: bool = True) -> str:
    """Render a mapping key, bare when it is a valid identifier."""
    if key is None or isinstance(key, bool):
        return _SENTINEL_KEYS[key]
    if isinstance(key, str):
        if is_identifier(key):
            return key
        return f"[{quote_string(key, single_quote)}]"
    if is_number(key):
        return f"[{format_number(key)}]"
    raise FormatError(
        f"can't format key of type {type(key).__name__}",
        kind=type(key).__name__,
        reason="unsupported type",
    )

