"""Display-width arithmetic for styled terminal rows.

Pane rows mix visible text with SGR escape sequences. Widths count visible
columns only, and clipping never splits a wide character or drops a style
code. File content is sanitized before it reaches a row.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
WIDE_EAST_ASIAN = frozenset({"W", "F"})
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def char_display_width(ch: str, col: int) -> int:
    """Columns taken by ``ch`` when drawn at column ``col``."""
    if ch == "\t":
        return TAB_STOP - col % TAB_STOP
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in WIDE_EAST_ASIAN else 1


def _segments(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_escape, chunk)`` pieces of ``text`` in order."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        if match.start() > pos:
            yield False, text[pos : match.start()]
        yield True, match.group(0)
        pos = match.end()
    if pos < len(text):
        yield False, text[pos:]


def display_width(text: str) -> int:
    col = 0
    for is_escape, chunk in _segments(text):
        if is_escape:
            continue
        for ch in chunk:
            col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` to at most ``max_cols`` visible columns.

    Escape codes past the cut are still emitted so a closing reset is never
    lost. Tabs are expanded to spaces.
    """
    if max_cols <= 0:
        return ""

    pieces: list[str] = []
    col = 0
    full = False
    for is_escape, chunk in _segments(text):
        if is_escape:
            pieces.append(chunk)
            continue
        if full:
            continue
        for ch in chunk:
            width = char_display_width(ch, col)
            if col + width > max_cols:
                full = True
                break
            pieces.append(" " * width if ch == "\t" else ch)
            col += width
    return "".join(pieces)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and pad the remainder with spaces."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def sanitize_terminal_text(source: str) -> str:
    """Replace control bytes with visible ``\\xNN`` escapes; tabs are kept."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)
