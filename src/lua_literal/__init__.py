"""lua_literal — convert between Python values and Lua table literals."""

from .deserializer import KeyedField, parse, reduce
from .errors import FormatError, LuaLiteralError, ParseError
from .nodes import Node, NodeKind
from .options import MAX_DEPTH, FormatOptions, resolve_options
from .serializer import format
from .strings import LUA_KEYWORDS, is_identifier

__all__ = [
    "format",
    "parse",
    "reduce",
    "FormatOptions",
    "resolve_options",
    "MAX_DEPTH",
    "Node",
    "NodeKind",
    "KeyedField",
    "LUA_KEYWORDS",
    "is_identifier",
    "LuaLiteralError",
    "FormatError",
    "ParseError",
]
