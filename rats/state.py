from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .file_tree_model import DirectorySnapshot
from .preview import PreviewState

MODE_NORMAL = "normal"
MODE_INSERT = "insert"


@dataclass
class AppState:
    current_path: Path
    snapshot: DirectorySnapshot = ()
    query: str = ""
    ranked: list[tuple[int, int]] = field(default_factory=list)
    cursor: int | None = None
    preview: PreviewState = field(default_factory=PreviewState)
    mode: str = MODE_NORMAL
    pending_keys: str = ""
    list_start: int = 0
    status_message: str = ""
    selected_path: Path | None = None
    dirty: bool = True
