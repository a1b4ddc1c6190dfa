"""Syntax-tree vocabulary consumed by the deserializer.

Any Lua parser can feed the deserializer once its output is translated
into these nodes; see ``reader.py`` for the luaparser adapter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(Enum):
    NilLiteral = "NilLiteral"
    BooleanLiteral = "BooleanLiteral"
    NumericLiteral = "NumericLiteral"
    StringLiteral = "StringLiteral"
    UnaryExpression = "UnaryExpression"
    Identifier = "Identifier"
    TableKey = "TableKey"
    TableKeyString = "TableKeyString"
    TableValue = "TableValue"
    TableConstructorExpression = "TableConstructorExpression"
    LocalStatement = "LocalStatement"
    ReturnStatement = "ReturnStatement"
    Chunk = "Chunk"
    Unsupported = "Unsupported"


LITERAL_KINDS = frozenset({
    NodeKind.NilLiteral,
    NodeKind.BooleanLiteral,
    NodeKind.NumericLiteral,
    NodeKind.StringLiteral,
})

KEYED_FIELD_KINDS = frozenset({NodeKind.TableKey, NodeKind.TableKeyString})


@dataclass(slots=True)
class Node:
    kind: NodeKind
    value: Any = None                 # decoded literal value
    name: str | None = None           # Identifier
    operator: str | None = None       # UnaryExpression
    argument: Node | None = None      # UnaryExpression
    key: Node | None = None           # TableKey / TableKeyString
    field_value: Node | None = None   # TableKey / TableKeyString / TableValue
    fields: list[Node] = field(default_factory=list)
    expressions: list[Node] = field(default_factory=list)  # Local/ReturnStatement
    body: list[Node] = field(default_factory=list)         # Chunk
    label: str | None = None          # foreign node type for Unsupported

    @property
    def type_name(self) -> str:
        """Name used in error messages."""
        if self.kind is NodeKind.Unsupported and self.label:
            return self.label
        return self.kind.value

    # -- Constructors -----------------------------------------------------

    @classmethod
    def nil(cls) -> Node:
        return cls(NodeKind.NilLiteral)

    @classmethod
    def boolean(cls, value: bool) -> Node:
        return cls(NodeKind.BooleanLiteral, value=value)

    @classmethod
    def number(cls, value: int | float) -> Node:
        return cls(NodeKind.NumericLiteral, value=value)

    @classmethod
    def string(cls, value: str) -> Node:
        return cls(NodeKind.StringLiteral, value=value)

    @classmethod
    def unary(cls, operator: str, argument: Node) -> Node:
        return cls(NodeKind.UnaryExpression, operator=operator, argument=argument)

    @classmethod
    def identifier(cls, name: str) -> Node:
        return cls(NodeKind.Identifier, name=name)

    @classmethod
    def table_key(cls, key: Node, value: Node) -> Node:
        """``[key] = value``"""
        return cls(NodeKind.TableKey, key=key, field_value=value)

    @classmethod
    def table_key_string(cls, key: Node, value: Node) -> Node:
        """``name = value``"""
        return cls(NodeKind.TableKeyString, key=key, field_value=value)

    @classmethod
    def table_value(cls, value: Node) -> Node:
        return cls(NodeKind.TableValue, field_value=value)

    @classmethod
    def table(cls, fields: list[Node]) -> Node:
        return cls(NodeKind.TableConstructorExpression, fields=list(fields))

    @classmethod
    def local(cls, expressions: list[Node]) -> Node:
        return cls(NodeKind.LocalStatement, expressions=list(expressions))

    @classmethod
    def return_(cls, expressions: list[Node]) -> Node:
        return cls(NodeKind.ReturnStatement, expressions=list(expressions))

    @classmethod
    def chunk(cls, body: list[Node]) -> Node:
        return cls(NodeKind.Chunk, body=list(body))

    @classmethod
    def unsupported(cls, label: str) -> Node:
        return cls(NodeKind.Unsupported, label=label)
