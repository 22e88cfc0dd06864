"""One-level structural diff between two nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Mapping

    from nested_map.tree import Key


@dataclass(frozen=True, slots=True)
class TreeDiff:
    """Top-level keys of two nodes split into four disjoint groups.

    ``changed`` maps each key to an ``(old_value, new_value)`` pair.
    """

    added: dict[Key, Any] = field(default_factory=dict)
    removed: dict[Key, Any] = field(default_factory=dict)
    changed: dict[Key, tuple[Any, Any]] = field(default_factory=dict)
    identical: dict[Key, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when nothing was added, removed or changed."""
        return not (self.added or self.removed or self.changed)

    def as_dict(self) -> dict[str, dict[Key, Any]]:
        return {
            "added": dict(self.added),
            "removed": dict(self.removed),
            "changed": dict(self.changed),
            "identical": dict(self.identical),
        }


def diff(new_tree: Mapping[Key, Any], old_tree: Mapping[Key, Any]) -> TreeDiff:
    """Compare the top-level entries of ``new_tree`` against ``old_tree``.

    Values are compared with ``==`` and nested nodes are not descended into:
    a nested node that differs anywhere shows up whole in ``changed``.
    """
    added = dict(new_tree)
    removed: dict[Key, Any] = {}
    changed: dict[Key, tuple[Any, Any]] = {}
    identical: dict[Key, Any] = {}
    for key, old_value in old_tree.items():
        if key not in new_tree:
            removed[key] = old_value
            continue
        new_value = added.pop(key)
        if new_value == old_value:
            identical[key] = old_value
        else:
            changed[key] = (old_value, new_value)
    return TreeDiff(added=added, removed=removed, changed=changed, identical=identical)
