"""Conversion between dotted path text and key paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nested_map.symbols import Symbol


if TYPE_CHECKING:
    from nested_map.tree import Path


class PathCodec:
    """Split and join separator-delimited path text such as ``"a.b.c"``."""

    def __init__(self, sep: str = ".") -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def split(self, text: str) -> tuple[str, ...]:
        """Convert path text into its key parts."""
        if not text:
            msg = "path text must not be empty"
            raise ValueError(msg)
        parts = tuple(text.split(self.sep))
        if any(not part for part in parts):
            msg = f"invalid path with empty segment: {text}"
            raise ValueError(msg)
        return parts

    def join(self, path: Path) -> str:
        """Render a key path as text."""
        parts = tuple(self._part_text(key) for key in path)
        if not parts:
            msg = "at least one key part is required"
            raise ValueError(msg)
        for part in parts:
            if not part:
                msg = "key parts must not be empty"
                raise ValueError(msg)
            if self.sep in part:
                msg = "key parts must not contain separator"
                raise ValueError(msg)
        return self.sep.join(parts)

    @staticmethod
    def _part_text(key: object) -> str:
        if isinstance(key, Symbol):
            return key.name
        if isinstance(key, bytes):
            return key.decode("utf-8", errors="replace")
        return str(key)
