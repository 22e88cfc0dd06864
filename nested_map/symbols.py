"""Symbolic names and the table that interns them."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, override

from .exceptions import SymbolTableFullError, UnknownSymbolError


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


logger = logging.getLogger(__name__)


class Symbol:
    """An interned symbolic name, distinct from a plain text key."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        super().__init__()
        if not isinstance(name, str):
            msg = f"symbol name must be str, not {type(name).__name__}"
            raise TypeError(msg)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self._name == other._name
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash((Symbol, self._name))

    @override
    def __repr__(self) -> str:
        return f"Symbol({self._name!r})"

    @override
    def __str__(self) -> str:
        return self._name


class SymbolTable:
    """Thread-safe registry mapping names to their interned ``Symbol``.

    The table only grows. ``max_size`` bounds that growth the way a runtime
    with a fixed symbol space would; interning past it raises
    ``SymbolTableFullError``.
    """

    def __init__(self, names: Iterable[str] = (), *, max_size: int | None = None) -> None:
        super().__init__()
        if max_size is not None and max_size < 0:
            msg = "max_size must not be negative"
            raise ValueError(msg)
        self._symbols: dict[str, Symbol] = {}
        self._lock = threading.Lock()
        self._max_size = max_size
        self.register(*names)

    def lookup(self, name: str) -> Symbol:
        """Return the existing symbol for ``name``; never creates one."""
        try:
            return self._symbols[name]
        except KeyError:
            logger.debug("Rejected unregistered symbol name %r", name)
            raise UnknownSymbolError(name) from None

    def intern(self, name: str) -> Symbol:
        """Return the symbol for ``name``, registering it if absent."""
        symbol = self._symbols.get(name)
        if symbol is not None:
            return symbol
        with self._lock:
            symbol = self._symbols.get(name)
            if symbol is None:
                if self._max_size is not None and len(self._symbols) >= self._max_size:
                    raise SymbolTableFullError(self._max_size)
                symbol = Symbol(name)
                self._symbols[name] = symbol
                logger.debug("Interned new symbol %r (table size %d)", name, len(self._symbols))
        return symbol

    def register(self, *names: str) -> None:
        """Intern every name in ``names``."""
        for name in names:
            _ = self.intern(name)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Symbol):
            name = name.name
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            names = sorted(self._symbols)
        return iter(names)

    @override
    def __repr__(self) -> str:
        return f"SymbolTable(size={len(self)})"


_default_table = SymbolTable()


def default_symbol_table() -> SymbolTable:
    """Return the process-wide symbol table."""
    return _default_table
