"""Structural rewrites: key normalization and serialization preparation."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from nested_map.symbols import Symbol, default_symbol_table
from nested_map.tree import DROP, Shape, classify, is_printable_chars


if TYPE_CHECKING:
    from nested_map.symbols import SymbolTable
    from nested_map.tree import Key, Tree


type Transform = Callable[[Key, Any], tuple[Key, Any] | object]


def convert(tree: Tree, transform: Transform) -> Tree:
    """Rebuild ``tree`` bottom-up, passing each node entry through ``transform``.

    ``transform(key, value)`` receives the already converted value and returns
    a replacement ``(key, value)`` pair, or ``DROP`` to omit the entry. Lists
    are converted element-wise; other values are returned as is.
    """
    match classify(tree):
        case Shape.NODE:
            converted: dict[Any, Any] = {}
            for key, value in tree.items():
                result = transform(key, convert(value, transform))
                if result is DROP:
                    continue
                new_key, new_value = result
                converted[new_key] = new_value
            return converted
        case Shape.LIST:
            return [convert(item, transform) for item in tree]
        case _:
            return tree


def _symbol_keys(resolve: Callable[[str], Symbol]) -> Transform:
    def transform(key: Key, value: Any) -> tuple[Key, Any]:
        if isinstance(key, str):
            return resolve(key), value
        if isinstance(key, bytes):
            try:
                return resolve(key.decode("utf-8")), value
            except UnicodeDecodeError:
                return key, value
        return key, value

    return transform


def normalize_keys_strict(tree: Tree, *, symbols: SymbolTable | None = None) -> Tree:
    """Replace text keys with already registered symbols.

    Raises ``UnknownSymbolError`` for a name missing from ``symbols`` (the
    process-wide table by default).
    """
    table = default_symbol_table() if symbols is None else symbols
    return convert(tree, _symbol_keys(table.lookup))


def normalize_keys_permissive(tree: Tree, *, symbols: SymbolTable | None = None) -> Tree:
    """Replace text keys with symbols, interning names that are not yet known.

    Every new key name grows the table for good, so only use this on trees
    whose keys come from a trusted source.
    """
    table = default_symbol_table() if symbols is None else symbols
    return convert(tree, _symbol_keys(table.intern))


def to_text(value: Any) -> Any:
    """Turn character-code lists into ``str``, recursing through other lists."""
    if classify(value) is not Shape.LIST or not value:
        return value
    if is_printable_chars(value):
        return "".join(map(chr, value))
    return [to_text(item) for item in value]


def _text_key(key: Key) -> Key:
    if isinstance(key, Symbol):
        return key.name
    if isinstance(key, bytes):
        try:
            return key.decode("utf-8")
        except UnicodeDecodeError:
            return key
    return key


def to_serializable(tree: Tree, key_value_hook: Transform | None = None) -> Tree:
    """Return a copy of ``tree`` ready for a text interchange encoder.

    ``key_value_hook`` runs first on every ``(key, value)`` pair and may
    rewrite it or return ``DROP``. Symbol and byte keys then become text and
    character-code lists become ``str``, including list elements and the root
    itself when ``tree`` is a list.
    """

    def transform(key: Key, value: Any) -> tuple[Key, Any] | object:
        if key_value_hook is not None:
            result = key_value_hook(key, value)
            if result is DROP:
                return DROP
            key, value = result
        return _text_key(key), to_text(value)

    return to_text(convert(tree, transform))
