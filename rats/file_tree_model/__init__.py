"""Domain model for one directory's listing.

This package contains non-UI primitives:
- entry datatype with lossy filename rendering
- snapshot loading with the parent entry and deterministic sort
"""

from __future__ import annotations

from .types import PARENT_ENTRY_NAME, DirectorySnapshot, Entry, safe_filename, safe_path_text
from .fs import (
    has_parent,
    list_directory_entries,
    load_directory_snapshot,
    normalize_directory,
    parent_entry_for,
)

__all__ = [
    "PARENT_ENTRY_NAME",
    "DirectorySnapshot",
    "Entry",
    "safe_filename",
    "safe_path_text",
    "has_parent",
    "list_directory_entries",
    "load_directory_snapshot",
    "normalize_directory",
    "parent_entry_for",
]
