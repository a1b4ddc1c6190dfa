"""Serializer: Python value → Lua table-literal chunk."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .errors import FormatError
from .options import FormatOptions, resolve_options
from .strings import format_key, format_number, quote_string
from .values import Value, is_mapping, is_number, is_sequence

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def format(value: Value, options: FormatOptions | Mapping[str, Any] | None = None, **overrides: Any) -> str:
    """Render *value* as ``return <expr>``.

    >>> format({"a": [1, 2]}, indent=None)
    'return{a={1,2,},}'
    """
    opts = resolve_options(options, **overrides)
    logger.debug("formatting %s with %s", type(value).__name__, opts)
    separator = " " if opts.pretty else ""
    return "return" + separator + _Formatter(opts).render(value, 0)


# ---------------------------------------------------------------------------
# Recursive rendering
# ---------------------------------------------------------------------------

class _Formatter:
    def __init__(self, options: FormatOptions) -> None:
        self.options = options
        # ids of the containers currently being rendered
        self._active: set[int] = set()

    def render(self, value: Any, level: int) -> str:
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        if is_number(value):
            return format_number(value)
        if isinstance(value, str):
            return quote_string(value, self.options.single_quote, self.options.multiline_string)
        if is_sequence(value):
            return self._table(value, level, self._element)
        if is_mapping(value):
            return self._table(value, level, self._entry)
        raise FormatError(
            f"can't format {type(value).__name__}",
            kind=type(value).__name__,
            reason="unsupported type",
        )

    def _table(self, container, level: int, render_item) -> str:
        if not container:
            return "{}"
        if level >= self.options.max_depth:
            raise FormatError(
                f"nesting deeper than {self.options.max_depth} levels",
                kind=type(container).__name__,
                reason="depth exceeded",
            )
        marker = id(container)
        if marker in self._active:
            raise FormatError(
                "can't format circular reference",
                kind=type(container).__name__,
                reason="circular reference",
            )
        self._active.add(marker)
        try:
            items = container.items() if is_mapping(container) else container
            parts = [render_item(item, level + 1) for item in items]
        finally:
            self._active.discard(marker)

        opts = self.options
        if not opts.pretty:
            return "{" + "".join(parts) + "}"
        inner = opts.indent_for(level + 1)
        lines = opts.eol.join(inner + part for part in parts)
        return "{" + opts.eol + lines + opts.eol + opts.indent_for(level) + "}"

    def _element(self, element: Any, level: int) -> str:
        return self.render(element, level) + ","

    def _entry(self, item: tuple, level: int) -> str:
        key, value = item
        assign = " = " if self.options.pretty else "="
        return format_key(key, self.options.single_quote) + assign + self.render(value, level) + ","
