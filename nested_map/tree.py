"""Tree data model shared by every nested map operation."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, override


if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence

    from .symbols import Symbol


type Key = Symbol | str | bytes | Hashable
type Path = Sequence[Key]
type Tree = dict[Key, Tree] | Any

_CONTROL_CODES: Final = frozenset(map(ord, "\n\r\t\v\b\f\x1b"))
_PRINTABLE_RANGES: Final = ((0x20, 0x7E), (0xA0, 0xD7FF), (0xE000, 0xFFFD), (0x10000, 0x10FFFF))


class Shape(enum.Enum):
    """Structural kind of a tree value."""

    NODE = "node"
    LIST = "list"
    LEAF = "leaf"


def classify(value: Any) -> Shape:
    """Return the structural shape of ``value``."""
    if isinstance(value, dict):
        return Shape.NODE
    if isinstance(value, list):
        return Shape.LIST
    return Shape.LEAF


def is_node(value: Any) -> bool:
    return classify(value) is Shape.NODE


def is_printable_chars(value: Any) -> bool:
    """Return True when ``value`` is a non-empty list of printable character codes."""
    if classify(value) is not Shape.LIST or not value:
        return False
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int):
            return False
        if item in _CONTROL_CODES:
            continue
        if not any(low <= item <= high for low, high in _PRINTABLE_RANGES):
            return False
    return True


class _Drop:
    __slots__ = ()

    @override
    def __repr__(self) -> str:
        return "DROP"

    @override
    def __reduce__(self) -> str:
        return "DROP"


DROP: Final = _Drop()
"""Returned by a ``convert`` transform to omit the entry from the output."""


@dataclass(frozen=True, slots=True)
class Found:
    """Successful traversal result."""

    value: Any


@dataclass(frozen=True, slots=True)
class NotFound:
    """Failed traversal result.

    ``remaining`` starts with the key that could not be resolved and
    ``value`` is where traversal stopped.
    """

    remaining: tuple[Key, ...]
    value: Any


type FindResult = Found | NotFound
