"""Pure operations over nested trees."""

from .access import find, get, put, remove
from .convert import convert, normalize_keys_permissive, normalize_keys_strict, to_serializable, to_text
from .diff import TreeDiff, diff
from .merge import merge


__all__ = [
    "TreeDiff",
    "convert",
    "diff",
    "find",
    "get",
    "merge",
    "normalize_keys_permissive",
    "normalize_keys_strict",
    "put",
    "remove",
    "to_serializable",
    "to_text",
]
