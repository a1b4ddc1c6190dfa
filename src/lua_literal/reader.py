"""Reader layer: converts luaparser's AST to ``Node`` trees."""

from __future__ import annotations

import logging

from luaparser import ast, astnodes

from .errors import ParseError
from .nodes import Node

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def read_chunk(text: str) -> Node:
    """Parse Lua *text* and return its Chunk node."""
    try:
        tree = ast.parse(text)
    except Exception as exc:
        logger.debug("luaparser rejected input: %s", exc)
        raise ParseError(f"invalid Lua source: {exc}", kind="Chunk", reason="syntax error") from exc
    try:
        return to_node(tree)
    except RecursionError as exc:
        raise ParseError("Lua source is nested too deeply", kind="Chunk", reason="depth exceeded") from exc


# ---------------------------------------------------------------------------
# Node translation
# ---------------------------------------------------------------------------

def to_node(lua_node) -> Node:
    """Translate one luaparser node (and its supported children)."""
    if isinstance(lua_node, astnodes.Chunk):
        return Node.chunk([to_node(stmt) for stmt in _statements(lua_node)])
    if isinstance(lua_node, astnodes.Return):
        return Node.return_([to_node(v) for v in _as_list(lua_node.values)])
    if isinstance(lua_node, astnodes.LocalAssign):
        return Node.local([to_node(v) for v in _as_list(lua_node.values)])

    if isinstance(lua_node, astnodes.Nil):
        return Node.nil()
    if isinstance(lua_node, astnodes.TrueExpr):
        return Node.boolean(True)
    if isinstance(lua_node, astnodes.FalseExpr):
        return Node.boolean(False)
    if isinstance(lua_node, astnodes.Number):
        return Node.number(lua_node.n)
    if isinstance(lua_node, astnodes.String):
        return Node.string(_string_value(lua_node))
    if isinstance(lua_node, astnodes.Name):
        return Node.identifier(lua_node.id)
    if isinstance(lua_node, astnodes.UMinusOp):
        return Node.unary("-", to_node(lua_node.operand))

    if isinstance(lua_node, astnodes.Table):
        return Node.table([
            _field(f) for f in lua_node.fields
            if not isinstance(f, astnodes.Comment)
        ])

    return Node.unsupported(type(lua_node).__name__)


def _field(field) -> Node:
    key = field.key
    value = to_node(field.value)
    if getattr(field, "between_brackets", False):
        return Node.table_key(to_node(key), value)
    if isinstance(key, astnodes.Name):
        return Node.table_key_string(Node.identifier(key.id), value)
    if isinstance(key, astnodes.String):
        return Node.table_key_string(Node.identifier(_string_value(key)), value)
    # positional fields carry an implicit index key (or none at all)
    return Node.table_value(value)


def _statements(chunk) -> list:
    return [
        stmt for stmt in _as_list(chunk.body.body)
        if not isinstance(stmt, astnodes.Comment)
    ]


def _as_list(values) -> list:
    if values is None:
        return []
    if isinstance(values, list):
        return values
    return [values]


def _string_value(node) -> str:
    """Decoded text of a luaparser String node.

    luaparser hands back the escape-decoded payload as ``bytes``.
    """
    s = node.s
    if isinstance(s, bytes):
        try:
            return s.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(
                f"string literal is not valid UTF-8: {exc}",
                kind="StringLiteral",
                reason="invalid string",
            ) from exc
    return s
