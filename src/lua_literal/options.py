"""Formatting options for the serializer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Union

MAX_DEPTH = 100

Indent = Union[int, str, None]

# camelCase spellings accepted from option mappings
_ALIASES = {
    "singleQuote": "single_quote",
    "multilineString": "multiline_string",
    "maxDepth": "max_depth",
}


@dataclass(frozen=True)
class FormatOptions:
    """Resolved serializer settings.

    ``indent`` is a number of spaces or a literal string repeated once per
    nesting level. Any falsy indent (``None``, ``0``, ``""``) selects
    compact output.
    """

    eol: str = "\n"
    single_quote: bool = True
    multiline_string: bool = False
    indent: Indent = 2
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.eol, str):
            raise TypeError(f"eol must be a str, not {type(self.eol).__name__}")
        for name in ("single_quote", "multiline_string"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be a bool")
        indent = self.indent
        if indent is False:
            object.__setattr__(self, "indent", None)
            indent = None
        if indent is True or not (
            indent is None or isinstance(indent, (int, str))
        ):
            raise TypeError(f"indent must be an int, a str or None, not {type(indent).__name__}")
        if isinstance(indent, int) and indent < 0:
            raise ValueError("indent must not be negative")
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError("max_depth must be a positive int")

    @property
    def pretty(self) -> bool:
        return bool(self.indent)

    def indent_for(self, level: int) -> str:
        """Indentation prefix for nesting *level*."""
        if not self.indent:
            return ""
        if isinstance(self.indent, int):
            return " " * (self.indent * level)
        return self.indent * level


def resolve_options(options: FormatOptions | Mapping[str, Any] | None = None, **overrides: Any) -> FormatOptions:
    """Build a FormatOptions from *options* and keyword *overrides*.

    *options* may be ``None``, a FormatOptions, or a mapping keyed by
    field name (camelCase spellings such as ``singleQuote`` are accepted).
    """
    if options is None:
        base = FormatOptions()
    elif isinstance(options, FormatOptions):
        base = options
    elif isinstance(options, Mapping):
        base = FormatOptions(**_normalize(options))
    else:
        raise TypeError(f"options must be a FormatOptions or a mapping, not {type(options).__name__}")

    if overrides:
        base = replace(base, **_normalize(overrides))
    return base


def _normalize(raw: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(FormatOptions)}
    out: dict[str, Any] = {}
    for name, value in raw.items():
        name = _ALIASES.get(name, name)
        if name not in known:
            raise TypeError(f"unknown format option {name!r}")
        out[name] = value
    return out
