"""Value model shared by the serializer and the deserializer.

Values are plain Python objects: ``None``, ``bool``, ``int``/``float``,
``str``, ``list`` and ``dict``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Union

Key = Union[str, bool, int, float, None]
Value = Union[None, bool, int, float, str, list["Value"], dict[Key, "Value"]]


def is_number(value: object) -> bool:
    # bool is an int subclass
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: object) -> bool:
    return isinstance(value, Mapping)

