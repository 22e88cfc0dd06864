"""Right-biased deep merge of nested trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nested_map.tree import is_node


if TYPE_CHECKING:
    from nested_map.tree import Tree


def merge(base: Tree, overlay: Tree) -> Tree:
    """Deep-merge ``overlay`` onto ``base``.

    Keys present in both merge recursively when both values are nodes;
    otherwise the overlay value wins, at every depth.

    >>> merge({"a": {"b": 1, "c": 2}, "d": 4}, {"a": {"b": 3}})
    {'a': {'b': 3, 'c': 2}, 'd': 4}
    """
    if not (is_node(base) and is_node(overlay)):
        return overlay
    merged: dict[Any, Any] = dict(base)
    for key, value in overlay.items():
        if key in merged and is_node(merged[key]) and is_node(value):
            merged[key] = merge(merged[key], value)
        else:
            merged[key] = value
    return merged
