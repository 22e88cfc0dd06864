"""Path-based access to nested trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from nested_map.exceptions import PathNotFoundError
from nested_map.tree import Found, NotFound, is_node


if TYPE_CHECKING:
    from nested_map.tree import FindResult, Path, Tree


_MISSING: Final = object()


def _has_key(node: dict[Any, Any], key: Any) -> bool:
    # unhashable keys can never be present
    try:
        return key in node
    except TypeError:
        return False


def find(path: Path, tree: Tree) -> FindResult:
    """Descend ``tree`` along ``path``.

    Returns ``Found(value)`` when every key resolves, otherwise
    ``NotFound(remaining, value)`` where ``remaining`` is the unconsumed part of
    the path (starting at the key that failed) and ``value`` is the value at
    which traversal stopped.
    """
    keys = tuple(path)
    current = tree
    for index, key in enumerate(keys):
        if not is_node(current) or not _has_key(current, key):
            return NotFound(keys[index:], current)
        current = current[key]
    return Found(current)


def get(path: Path, tree: Tree, default: Any = _MISSING) -> Any:
    """Return the value at ``path``.

    Without ``default`` an unresolvable path raises ``PathNotFoundError``;
    with it, ``default`` is returned instead.
    """
    result = find(path, tree)
    if isinstance(result, Found):
        return result.value
    if default is _MISSING:
        raise PathNotFoundError(tuple(path), result.remaining, result.value)
    return default


def put(path: Path, tree: Tree, value: Any) -> Tree:
    """Return a copy of ``tree`` with ``value`` stored at ``path``.

    Missing intermediate keys get empty nodes and an intermediate value that
    is not a node is replaced by one. An empty path returns ``value``.
    """
    keys = tuple(path)
    if not keys:
        return value
    return _put(keys, tree if is_node(tree) else {}, value)


def _put(keys: tuple[Any, ...], node: dict[Any, Any], value: Any) -> dict[Any, Any]:
    key, rest = keys[0], keys[1:]
    updated = dict(node)
    if rest:
        child = node.get(key)
        updated[key] = _put(rest, child if is_node(child) else {}, value)
    else:
        updated[key] = value
    return updated


def remove(path: Path, tree: Tree) -> Tree:
    """Return a copy of ``tree`` without the entry at ``path``.

    Removal is permissive: when any intermediate key is missing or does not
    hold a node, ``tree`` is returned unchanged.
    """
    keys = tuple(path)
    if not keys or not is_node(tree):
        return tree
    key, rest = keys[0], keys[1:]
    if not rest:
        if not _has_key(tree, key):
            return tree
        updated = dict(tree)
        del updated[key]
        return updated
    if not _has_key(tree, key) or not is_node(tree[key]):
        return tree
    child = tree[key]
    updated = dict(tree)
    updated[key] = remove(rest, child)
    return updated
