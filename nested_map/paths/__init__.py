"""Path text and flattened path utilities."""

from .codec import PathCodec
from .flat import flatten, unflatten


__all__ = ["PathCodec", "flatten", "unflatten"]
