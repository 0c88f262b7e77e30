"""Domain datatypes for directory listing entries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PARENT_ENTRY_NAME = ".."


def safe_filename(path: Path) -> str:
    """Return the final path component as valid text.

    Undecodable bytes (kept as surrogate escapes by ``os.scandir``) are
    replaced with U+FFFD so names can always be matched and displayed.
    """
    name = path.name
    if not name:
        return PARENT_ENTRY_NAME if str(path).endswith(PARENT_ENTRY_NAME) else str(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return os.fsencode(name).decode("utf-8", errors="replace")
    return name


def safe_path_text(path: Path) -> str:
    """Return ``path`` as printable text using the same lossy rule as names."""
    text = str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return os.fsencode(text).decode("utf-8", errors="replace")
    return text


@dataclass(frozen=True)
class Entry:
    """One listing row: a path plus the kind observed when it was loaded."""

    path: Path
    is_dir: bool
    is_parent: bool = False

    @property
    def name(self) -> str:
        if self.is_parent:
            return PARENT_ENTRY_NAME
        return safe_filename(self.path)


DirectorySnapshot = tuple[Entry, ...]


__all__ = [
    "PARENT_ENTRY_NAME",
    "DirectorySnapshot",
    "Entry",
    "safe_filename",
    "safe_path_text",
]
