"""Filter and selection model for the directory browser.

``DirectoryBrowser`` owns no state of its own: every operation reads and
mutates the ``AppState`` it was built with, so the runtime loop, key handlers,
and renderer all share one explicit session value.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .file_tree_model import (
    DirectorySnapshot,
    Entry,
    load_directory_snapshot,
    normalize_directory,
)
from .preview import load_preview, scroll_down, scroll_up
from .search import rank_candidates
from .state import AppState

logger = logging.getLogger(__name__)


def rank_snapshot(snapshot: DirectorySnapshot, query: str) -> list[tuple[int, int]]:
    """Rank snapshot entries by name against ``query``.

    Returns ``(snapshot_index, score)`` pairs, best first, ties in snapshot
    order. The parent entry competes under its literal name ``..``.
    """
    return rank_candidates(query, [entry.name for entry in snapshot])


def rank_directory(directory: Path | str, query: str) -> list[tuple[Entry, int]]:
    """Load ``directory`` once and return its ranked entries.

    Non-interactive counterpart of a browsing session; raises ``OSError`` when
    the directory cannot be read.
    """
    snapshot = load_directory_snapshot(directory)
    return [(snapshot[idx], score) for idx, score in rank_snapshot(snapshot, query)]


class DirectoryBrowser:
    """Navigation, query editing, and cursor movement over an ``AppState``."""

    def __init__(self, state: AppState) -> None:
        self.state = state

    @classmethod
    def open(cls, directory: Path | str, query: str = "") -> DirectoryBrowser:
        """Start a session at ``directory`` with an optional initial query.

        Raises ``OSError`` when the starting directory cannot be read.
        """
        target = normalize_directory(directory)
        snapshot = load_directory_snapshot(target)
        browser = cls(AppState(current_path=target, snapshot=snapshot, query=query))
        browser.recompute()
        logger.info("opened %s with %d entries", target, len(snapshot))
        return browser

    def set_directory(self, directory: Path | str) -> None:
        """Replace the snapshot with ``directory`` and clear the query.

        A failed read re-raises and leaves every piece of state untouched.
        """
        target = normalize_directory(directory)
        try:
            snapshot = load_directory_snapshot(target)
        except OSError as exc:
            logger.warning("cannot open directory %s: %s", target, exc)
            raise
        state = self.state
        state.current_path = target
        state.snapshot = snapshot
        state.query = ""
        self.recompute()
        logger.debug("entered %s (%d entries)", target, len(snapshot))

    def recompute(self) -> None:
        """Rebuild the ranked list from snapshot and query; reset the cursor."""
        state = self.state
        state.ranked = rank_snapshot(state.snapshot, state.query)
        state.list_start = 0
        self._select(0 if state.ranked else None)

    def _select(self, cursor: int | None) -> None:
        state = self.state
        state.cursor = cursor
        state.preview = load_preview(self.selected_entry())
        state.dirty = True

    def append_to_query(self, char: str) -> None:
        self.state.query += char
        self.recompute()

    def pop_from_query(self) -> None:
        self.state.query = self.state.query[:-1]
        self.recompute()

    def clear_query(self) -> None:
        self.state.query = ""
        self.recompute()

    def move_next(self) -> bool:
        """Advance the cursor, wrapping from the last entry to the first."""
        count = len(self.state.ranked)
        if count == 0:
            return False
        cursor = self.state.cursor
        self._select(0 if cursor is None or cursor >= count - 1 else cursor + 1)
        return True

    def move_previous(self) -> bool:
        """Retreat the cursor, wrapping from the first entry to the last."""
        count = len(self.state.ranked)
        if count == 0:
            return False
        cursor = self.state.cursor
        self._select(count - 1 if cursor is None or cursor == 0 else cursor - 1)
        return True

    def move_first(self) -> bool:
        if not self.state.ranked:
            return False
        self._select(0)
        return True

    def move_last(self) -> bool:
        if not self.state.ranked:
            return False
        self._select(len(self.state.ranked) - 1)
        return True

    def selected_entry(self) -> Entry | None:
        state = self.state
        if state.cursor is None:
            return None
        snapshot_idx, _score = state.ranked[state.cursor]
        return state.snapshot[snapshot_idx]

    def ranked_entries(self) -> list[tuple[Entry, int]]:
        snapshot = self.state.snapshot
        return [(snapshot[idx], score) for idx, score in self.state.ranked]

    def activate_selection(self) -> Path | None:
        """Enter the selected directory or return the selected file path.

        Returns ``None`` after navigating or when nothing is selected. Directory
        read failures propagate as ``OSError`` with state unchanged.
        """
        entry = self.selected_entry()
        if entry is None:
            return None
        if entry.is_parent:
            self.set_directory(self.state.current_path.parent)
            return None
        if entry.is_dir:
            self.set_directory(entry.path)
            return None
        logger.info("selected %s", entry.path)
        return entry.path

    def scroll_preview_down(self) -> bool:
        moved = scroll_down(self.state.preview)
        if moved:
            self.state.dirty = True
        return moved

    def scroll_preview_up(self) -> bool:
        moved = scroll_up(self.state.preview)
        if moved:
            self.state.dirty = True
        return moved
