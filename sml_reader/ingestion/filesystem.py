"""Async filesystem helpers used by the folder reader."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

SML_FILE_SUFFIXES = (".yml", ".yaml")


@dataclass(frozen=True)
class FolderListing:
    """Immediate entries of one folder, split into files and sub-folders."""

    files: tuple[str, ...]
    folders: tuple[str, ...]


def is_sml_file(name: str) -> bool:
    """Check the extension convention (case-sensitive)."""
    return name.endswith(SML_FILE_SUFFIXES)


def _scan_folder(path: Path) -> FolderListing:
    files: list[str] = []
    folders: list[str] = []
    # iterdir raises FileNotFoundError / NotADirectoryError for a bad path
    for entry in sorted(path.iterdir()):
        if entry.is_dir():
            folders.append(entry.name)
        elif entry.is_file():
            files.append(entry.name)
    return FolderListing(files=tuple(files), folders=tuple(folders))


async def list_folder(path: Path | str) -> FolderListing:
    """List a folder without blocking the event loop."""
    return await asyncio.to_thread(_scan_folder, Path(path))


async def read_text(path: Path | str) -> str:
    """Read a UTF-8 text file without blocking the event loop."""
    return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
