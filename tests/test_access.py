import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from nested_map.exceptions import PathNotFoundError
from nested_map.ops.access import find, get, put, remove
from nested_map.tree import Found, NotFound


_KEYS = st.text(min_size=1, max_size=8)
_PATHS = st.lists(_KEYS, min_size=1, max_size=4)
_SCALARS = st.none() | st.booleans() | st.integers(min_value=-10_000, max_value=10_000) | st.text(max_size=20)
_TREES = st.recursive(
    _SCALARS,
    lambda children: st.lists(children, max_size=3) | st.dictionaries(_KEYS, children, max_size=3),
    max_leaves=12,
)
_NODES = st.dictionaries(_KEYS, _TREES, max_size=5)


def test_find_resolves_nested_value() -> None:
    tree = {"a": {"b": {"c": 1}}}
    assert find(["a", "b", "c"], tree) == Found(1)
    assert find(("a", "b"), tree) == Found({"c": 1})


def test_find_empty_path_returns_whole_tree() -> None:
    tree = {"a": 1}
    assert find([], tree) == Found(tree)
    assert find([], 42) == Found(42)


def test_find_reports_remaining_path_and_stop_value() -> None:
    tree = {"a": {"b": {"c": 1}}}
    assert find(["a", "x", "c"], tree) == NotFound(("x", "c"), {"b": {"c": 1}})


def test_find_stops_on_non_node_mid_path() -> None:
    tree = {"a": {"b": 5}}
    assert find(["a", "b", "c"], tree) == NotFound(("c",), 5)
    assert find(["a"], [1, 2]) == NotFound(("a",), [1, 2])


def test_get_strict_raises_with_diagnostics() -> None:
    tree = {"a": {"b": 1}}
    with pytest.raises(PathNotFoundError, match="path not found") as excinfo:
        _ = get(["a", "missing", "deeper"], tree)

    assert excinfo.value.path == ("a", "missing", "deeper")
    assert excinfo.value.remaining == ("missing", "deeper")
    assert excinfo.value.value == {"b": 1}
    assert isinstance(excinfo.value, KeyError)


def test_get_with_default() -> None:
    tree = {"a": {"b": 1}}
    assert get(["a", "b"], tree, "dflt") == 1
    assert get(["a", "c"], tree, "dflt") == "dflt"
    assert get(["a", "b", "c"], tree, "dflt") == "dflt"
    assert get(["a", "c"], tree, None) is None


def test_get_empty_path_returns_tree() -> None:
    tree = {"a": 1}
    assert get([], tree) is tree


def test_put_creates_intermediate_nodes() -> None:
    assert put(["a", "b", "c"], {}, 1) == {"a": {"b": {"c": 1}}}


def test_put_replaces_existing_leaf_and_keeps_siblings() -> None:
    tree = {"a": {"b": 1, "c": 2}, "d": 4}
    assert put(["a", "b"], tree, 3) == {"a": {"b": 3, "c": 2}, "d": 4}


def test_put_overwrites_non_node_when_descending() -> None:
    tree = {"a": 5}
    assert put(["a", "b"], tree, 1) == {"a": {"b": 1}}


def test_put_empty_path_replaces_tree() -> None:
    assert put([], {"a": 1}, "new") == "new"


def test_put_does_not_mutate_input() -> None:
    tree = {"a": {"b": 1}, "x": {"y": 2}}
    snapshot = copy.deepcopy(tree)
    result = put(["a", "c"], tree, 3)

    assert tree == snapshot
    assert result["x"] is tree["x"]
    assert result["a"] is not tree["a"]


def test_remove_single_key() -> None:
    assert remove(["a"], {"a": 1, "b": 2}) == {"b": 2}


def test_remove_nested_key() -> None:
    tree = {"a": {"b": 1, "c": 2}}
    assert remove(["a", "b"], tree) == {"a": {"c": 2}}


def test_remove_missing_paths_are_noops() -> None:
    tree = {"a": {"b": 1}, "s": "scalar"}
    assert remove(["zzz"], tree) == tree
    assert remove(["zzz", "b"], tree) == tree
    assert remove(["s", "b"], tree) == tree
    assert remove(["a", "b", "c"], tree) == tree
    assert remove([], tree) == tree


def test_remove_does_not_mutate_input() -> None:
    tree = {"a": {"b": 1, "c": 2}}
    snapshot = copy.deepcopy(tree)
    _ = remove(["a", "b"], tree)
    assert tree == snapshot


def test_remove_and_put_policies_differ_on_scalar_intermediate() -> None:
    tree = {"a": 1}
    assert remove(["a", "b"], tree) == {"a": 1}
    assert put(["a", "b"], tree, 2) == {"a": {"b": 2}}


@given(path=_PATHS, tree=_NODES, value=_TREES)
def test_get_after_put_returns_value(path: list[str], tree: dict, value: object) -> None:
    assert get(path, put(path, tree, value)) == value


@given(tree=_NODES, key=_KEYS, value=_TREES)
def test_remove_after_put_restores_absent_key(tree: dict, key: str, value: object) -> None:
    base = {k: v for k, v in tree.items() if k != key}
    assert remove([key], put([key], base, value)) == base


@given(tree=_TREES)
def test_find_empty_path_identity(tree: object) -> None:
    assert find([], tree) == Found(tree)


def test_unhashable_path_keys_are_unresolvable() -> None:
    tree = {"a": {"b": 1}}
    assert find(["a", [98]], tree) == NotFound(([98],), {"b": 1})
    assert get([["a"]], tree, "dflt") == "dflt"
    assert remove([["a"]], tree) == tree
    assert remove([["a"], "b"], tree) == tree
    with pytest.raises(PathNotFoundError):
        _ = get(["a", [98]], tree)
