"""Deserializer: Lua table-literal chunk → Python value."""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from .errors import ParseError
from .nodes import KEYED_FIELD_KINDS, LITERAL_KINDS, Node, NodeKind
from .options import MAX_DEPTH
from .values import Value, is_number

logger = logging.getLogger(__name__)


class KeyedField(NamedTuple):
    """A reduced ``[key] = value`` or ``name = value`` table field."""

    key: Any
    value: Value


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: str | bytes, max_depth: int = MAX_DEPTH) -> Value:
    """Parse a Lua chunk such as ``return {...}`` into a value."""
    from .reader import read_chunk

    if isinstance(text, bytes):
        text = text.decode("utf-8")
    logger.debug("parsing %d characters of Lua", len(text))
    return reduce(read_chunk(text), max_depth)


def reduce(node: Node, max_depth: int = MAX_DEPTH) -> Value:
    """Reduce a syntax tree to a value."""
    return _Reducer(max_depth).reduce(node, 0)


# ---------------------------------------------------------------------------
# Reduction
# ---------------------------------------------------------------------------

class _Reducer:
    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth

    def reduce(self, node: Node, depth: int) -> Any:
        kind = node.kind

        if kind in LITERAL_KINDS:
            return node.value
        if kind is NodeKind.UnaryExpression:
            return self._negate(node)
        if kind is NodeKind.Identifier:
            return node.name

        if kind in KEYED_FIELD_KINDS:
            return KeyedField(
                self.reduce(node.key, depth),
                self.reduce(node.field_value, depth),
            )
        if kind is NodeKind.TableValue:
            return self.reduce(node.field_value, depth)
        if kind is NodeKind.TableConstructorExpression:
            return self._table(node, depth + 1)

        # only the first statement of a chunk is looked at
        if kind in (NodeKind.LocalStatement, NodeKind.ReturnStatement):
            values = [self.reduce(e, depth) for e in node.expressions]
            return values[0] if len(values) == 1 else values
        if kind is NodeKind.Chunk:
            return self.reduce(node.body[0], depth) if node.body else None

        raise ParseError(
            f"can't parse {node.type_name}",
            kind=node.type_name,
            reason="unsupported node",
        )

    def _negate(self, node: Node) -> int | float:
        arg = node.argument
        if node.operator == "-" and arg is not None and arg.kind is NodeKind.NumericLiteral and is_number(arg.value):
            return -arg.value
        operand = arg.type_name if arg is not None else "nothing"
        raise ParseError(
            f"can't parse unary '{node.operator}' applied to {operand}",
            kind=NodeKind.UnaryExpression.value,
            reason="unsupported node",
        )

    def _table(self, node: Node, depth: int) -> list | dict:
        if depth > self.max_depth:
            raise ParseError(
                f"tables nested deeper than {self.max_depth} levels",
                kind=NodeKind.TableConstructorExpression.value,
                reason="depth exceeded",
            )
        fields = node.fields
        if fields and fields[0].kind in KEYED_FIELD_KINDS:
            mapping: dict = {}
            for f in fields:
                item = self.reduce(f, depth)
                if not isinstance(item, KeyedField):
                    raise ParseError(
                        "can't parse a positional field in a keyed table",
                        kind=f.type_name,
                        reason="mixed table",
                    )
                try:
                    mapping[item.key] = item.value
                except TypeError as exc:
                    raise ParseError(
                        f"can't use {type(item.key).__name__} as a table key",
                        kind=f.type_name,
                        reason="unsupported key",
                    ) from exc
            # {} is ambiguous; it always decodes as an empty list
            return mapping or []

        # a keyed field inside a positional table degrades to [key, value]
        return [
            [item.key, item.value] if isinstance(item, KeyedField) else item
            for item in (self.reduce(f, depth) for f in fields)
        ]
