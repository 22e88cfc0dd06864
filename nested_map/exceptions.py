"""Nested map exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from .tree import Key


class NestedMapError(Exception):
    """Base exception for nested map errors."""


class PathNotFoundError(NestedMapError, KeyError):
    """Raised by a strict ``get`` when the path cannot be resolved."""

    def __init__(self, path: tuple[Key, ...], remaining: tuple[Key, ...], value: Any) -> None:
        self.path = path
        self.remaining = remaining
        self.value = value
        msg = f"path not found: {list(path)!r} (unresolved: {list(remaining)!r})"
        super().__init__(msg)

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownSymbolError(NestedMapError, KeyError):
    """Raised when a strict lookup meets a name that was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        msg = f"unknown symbol: {name!r}"
        super().__init__(msg)

    def __str__(self) -> str:
        return str(self.args[0])


class SymbolTableFullError(NestedMapError):
    """Raised when interning would grow a bounded symbol table past its limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        msg = f"symbol table is full ({limit} symbols)"
        super().__init__(msg)
