"""Flattening nested trees into path/value pairs and back."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nested_map.ops.access import put
from nested_map.tree import is_node


if TYPE_CHECKING:
    from collections.abc import Iterable

    from nested_map.tree import Key, Path, Tree


def flatten(tree: Tree) -> list[tuple[tuple[Key, ...], Any]]:
    """Return every leaf of ``tree`` with its full key path.

    Empty nodes are reported with an empty dict value so that ``unflatten``
    can restore them. Pairs are ordered by the text form of their path.
    """
    items: list[tuple[tuple[Key, ...], Any]] = []

    def walk(path: tuple[Key, ...], value: Any) -> None:
        if is_node(value) and value:
            for key, child in value.items():
                walk((*path, key), child)
        else:
            items.append((path, value))

    walk((), tree)
    return sorted(items, key=lambda item: tuple(str(key) for key in item[0]))


def unflatten(items: Iterable[tuple[Path, Any]]) -> Tree:
    """Rebuild a tree from path/value pairs.

    Shorter paths are applied first, so a pair with the empty path sets the
    root and deeper pairs are stored inside it.
    """
    tree: Tree = {}
    for path, value in sorted(((tuple(path), value) for path, value in items), key=lambda item: len(item[0])):
        tree = put(path, tree, value)
    return tree
