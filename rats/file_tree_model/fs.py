"""Filesystem scanning for single-directory snapshots."""

from __future__ import annotations

import os
from pathlib import Path

from .types import PARENT_ENTRY_NAME, DirectorySnapshot, Entry


def normalize_directory(path: Path | str) -> Path:
    """Return an absolute path without resolving symlinks."""
    return Path(os.path.abspath(os.fspath(path)))


def has_parent(directory: Path) -> bool:
    """Return whether ``directory`` is below a filesystem root."""
    return directory.parent != directory


def parent_entry_for(directory: Path) -> Entry:
    return Entry(path=directory / PARENT_ENTRY_NAME, is_dir=True, is_parent=True)


def _entry_is_dir(child: os.DirEntry[str]) -> bool:
    try:
        return child.is_dir()
    except OSError:
        return False


def list_directory_entries(directory: Path) -> list[Entry]:
    """List immediate children sorted directories first, then by name.

    Names compare case-sensitively by codepoint. Scan errors are raised.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as children:
        for child in children:
            entries.append(Entry(path=Path(child.path), is_dir=_entry_is_dir(child)))
    entries.sort(key=lambda entry: (not entry.is_dir, entry.name))
    return entries


def load_directory_snapshot(directory: Path | str) -> DirectorySnapshot:
    """Load a complete snapshot of ``directory``.

    The parent entry comes first unless ``directory`` is a filesystem root.
    Raises ``OSError`` when the directory cannot be listed.
    """
    target = normalize_directory(directory)
    children = list_directory_entries(target)
    if has_parent(target):
        return (parent_entry_for(target), *children)
    return tuple(children)


__all__ = [
    "has_parent",
    "list_directory_entries",
    "load_directory_snapshot",
    "normalize_directory",
    "parent_entry_for",
]
