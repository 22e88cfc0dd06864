"""nested-map - operations over nested key-value configuration trees"""

import importlib.metadata
import warnings

from .exceptions import NestedMapError, PathNotFoundError, SymbolTableFullError, UnknownSymbolError
from .ops import (
    TreeDiff,
    convert,
    diff,
    find,
    get,
    merge,
    normalize_keys_permissive,
    normalize_keys_strict,
    put,
    remove,
    to_serializable,
    to_text,
)
from .paths import PathCodec, flatten, unflatten
from .symbols import Symbol, SymbolTable, default_symbol_table
from .tree import DROP, Found, NotFound, Shape, classify, is_printable_chars


try:
    __version__ = importlib.metadata.version("nested-map")
except importlib.metadata.PackageNotFoundError:
    warnings.warn("nested-map is not installed; version is unknown", stacklevel=2)
    __version__ = "0.0.0"


__all__ = [
    "DROP",
    "Found",
    "NestedMapError",
    "NotFound",
    "PathCodec",
    "PathNotFoundError",
    "Shape",
    "Symbol",
    "SymbolTable",
    "SymbolTableFullError",
    "TreeDiff",
    "UnknownSymbolError",
    "__version__",
    "classify",
    "convert",
    "default_symbol_table",
    "diff",
    "find",
    "flatten",
    "get",
    "is_printable_chars",
    "merge",
    "normalize_keys_permissive",
    "normalize_keys_strict",
    "put",
    "remove",
    "to_serializable",
    "to_text",
    "unflatten",
]
