"""Reader-specific exceptions."""

from __future__ import annotations

from pathlib import Path


class SMLReaderError(Exception):
    """Base error for the SML reader."""


class MaxRecursionDepthError(SMLReaderError):
    """Folder nesting went past the recursion bound (cyclic or pathological tree)."""

    def __init__(self, path: Path | str, depth: int) -> None:
        super().__init__(
            f"Max recursion depth reached ({depth}). Current folder: {path}"
        )
        self.path = Path(path)
        self.depth = depth
