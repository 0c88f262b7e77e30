"""Rendering for the split listing/preview terminal view.

Builds complete ANSI frames from a read-only ``RenderContext`` snapshot of the
session state: a path header, the ranked listing beside the preview pane, and
a mode/filter status line.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from ..ansi import fit_ansi_line, sanitize_terminal_text
from ..file_tree_model import Entry, safe_path_text
from ..search import fuzzy_match
from ..state import MODE_INSERT, AppState
from ..ui_theme import UITheme
from .help import status_line_text

DIR_ICON = "\U0001f4c1"
FILE_ICON = "\U0001f4c4"
SELECTED_MARKER = ">> "
UNSELECTED_MARKER = "   "
PANE_DIVIDER = "│"
EMPTY_PREVIEW_TEXT = "Select a file to preview"
MIN_PANE_WIDTH = 10
CHROME_ROWS = 3


@dataclass
class RenderContext:
    current_path: Path
    entries: list[tuple[Entry, int]]
    cursor: int | None
    list_start: int
    query: str
    mode: str
    preview_text: str | None
    preview_scroll: int
    status_message: str
    width: int
    height: int
    left_width: int
    theme: UITheme

    @classmethod
    def from_state(
        cls,
        state: AppState,
        *,
        width: int,
        height: int,
        left_width: int,
        theme: UITheme,
    ) -> RenderContext:
        snapshot = state.snapshot
        return cls(
            current_path=state.current_path,
            entries=[(snapshot[idx], score) for idx, score in state.ranked],
            cursor=state.cursor,
            list_start=state.list_start,
            query=state.query,
            mode=state.mode,
            preview_text=state.preview.text,
            preview_scroll=state.preview.scroll,
            status_message=state.status_message,
            width=width,
            height=height,
            left_width=left_width,
            theme=theme,
        )


def compute_left_width(total_width: int, percent: float) -> int:
    """Return list pane width for ``percent`` of the screen, leaving room for the preview."""
    desired = int(total_width * percent / 100.0)
    max_left = max(1, total_width - MIN_PANE_WIDTH - 1)
    min_left = min(MIN_PANE_WIDTH, max_left)
    return max(min_left, min(desired, max_left))


def visible_list_rows(height: int) -> int:
    return max(1, height - CHROME_ROWS)


def clamp_list_start(cursor: int | None, list_start: int, visible_rows: int, total: int) -> int:
    """Return a list scroll offset that keeps ``cursor`` on screen."""
    if cursor is None or total <= 0:
        return 0
    start = list_start
    if cursor < start:
        start = cursor
    elif cursor >= start + visible_rows:
        start = cursor - visible_rows + 1
    return max(0, min(start, max(0, total - visible_rows)))


def highlight_matches(name: str, query: str, base_style: str, theme: UITheme) -> str:
    """Emphasize the characters of raw ``name`` that matched ``query``.

    Indices come from the same name the ranking saw; each character is
    sanitized on output, so an escaped control byte is emphasized as a whole.
    """
    if not query or not theme.match_hit or len(name.lower()) != len(name):
        return sanitize_terminal_text(name)
    match = fuzzy_match(query, name)
    if match is None or not match.matched_indices:
        return sanitize_terminal_text(name)
    hits = set(match.matched_indices)
    out: list[str] = []
    for idx, ch in enumerate(name):
        shown = sanitize_terminal_text(ch)
        if idx in hits:
            out.append(f"{theme.match_hit}{shown}{theme.reset}{base_style}")
        else:
            out.append(shown)
    return "".join(out)


def format_list_row(entry: Entry, selected: bool, query: str, theme: UITheme) -> str:
    icon = DIR_ICON if entry.is_dir else FILE_ICON
    if selected:
        name = sanitize_terminal_text(entry.name)
        return f"{theme.list_selected}{SELECTED_MARKER}{icon} {name}{theme.reset}"
    style = theme.list_dir if entry.is_dir else theme.list_file
    return f"{UNSELECTED_MARKER}{style}{icon} {highlight_matches(entry.name, query, style, theme)}{theme.reset}"


def split_preview_lines(text: str) -> list[str]:
    """Split on ``\\n`` only; a trailing newline does not add an empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def preview_title(total_lines: int, scroll: int, visible_rows: int) -> str:
    """Return ``Preview`` plus a ``[first..last/total]`` range when text overflows."""
    if total_lines <= visible_rows:
        return "Preview"
    last = min(scroll + visible_rows, total_lines)
    return f"Preview [{scroll + 1}..{last}/{total_lines}]"


def build_frame(context: RenderContext) -> list[str]:
    """Compose every screen row, each padded to ``context.width`` columns."""
    theme = context.theme
    width = max(1, context.width)
    left_width = context.left_width
    right_width = max(1, width - left_width - 1)
    rows = visible_list_rows(context.height)
    divider = f"{theme.divider}{PANE_DIVIDER}{theme.reset}"

    header = f"{theme.header}Path: {sanitize_terminal_text(safe_path_text(context.current_path))}{theme.reset}"
    frame = [fit_ansi_line(header, width)]

    if context.preview_text is None:
        preview_lines = [EMPTY_PREVIEW_TEXT]
        title = "Preview"
    else:
        preview_lines = split_preview_lines(context.preview_text)
        title = preview_title(len(preview_lines), context.preview_scroll, rows)
        preview_lines = preview_lines[context.preview_scroll : context.preview_scroll + rows]

    files_title = f"{theme.preview_title}Files ({len(context.entries)}){theme.reset}"
    frame.append(
        fit_ansi_line(files_title, left_width)
        + divider
        + fit_ansi_line(f"{theme.preview_title}{title}{theme.reset}", right_width)
    )

    for row in range(rows):
        list_idx = context.list_start + row
        left = ""
        if list_idx < len(context.entries):
            entry, _score = context.entries[list_idx]
            left = format_list_row(entry, list_idx == context.cursor, context.query, theme)
        right = ""
        if row < len(preview_lines):
            right = f"{theme.preview_text}{sanitize_terminal_text(preview_lines[row])}{theme.reset}"
        frame.append(fit_ansi_line(left, left_width) + divider + fit_ansi_line(right, right_width))

    if context.status_message:
        status = f"{theme.status_error}{sanitize_terminal_text(context.status_message)}{theme.reset}"
    else:
        style = theme.status_insert if context.mode == MODE_INSERT else theme.status_normal
        status = f"{style}{sanitize_terminal_text(status_line_text(context.mode, context.query))}{theme.reset}"
    frame.append(fit_ansi_line(status, width))
    return frame


def render_frame(context: RenderContext, fd: int | None = None) -> None:
    """Write one full frame to ``fd`` (stdout by default)."""
    out = ["\033[H\033[J", "\r\n".join(build_frame(context))]
    target_fd = sys.stdout.fileno() if fd is None else fd
    os.write(target_fd, "".join(out).encode("utf-8", errors="replace"))
