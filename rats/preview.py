"""Plain-text preview loading for the selected listing entry.

Binary files are recognized by extension or by a NUL byte and replaced with a
placeholder. Text longer than ``PREVIEW_MAX_BYTES`` is cut and followed by a
marker carrying the full byte count.
"""

from __future__ import annotations

import logging
import stat
from dataclasses import dataclass

from .file_tree_model import Entry

logger = logging.getLogger(__name__)

PREVIEW_MAX_BYTES = 50_000
PREVIEW_SCROLL_STEP = 5
UNREADABLE_PLACEHOLDER = "Could not read file"
BINARY_EXTENSIONS = frozenset(
    {
        "exe", "bin", "dll", "so", "dylib", "a", "o", "obj",
        "jpg", "jpeg", "png", "gif", "bmp", "ico", "tiff", "webp",
        "mp3", "mp4", "wav", "flac", "ogg", "avi", "mkv", "mov",
        "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
        "zip", "tar", "gz", "bz2", "7z", "rar",
    }
)


@dataclass
class PreviewState:
    text: str | None = None
    scroll: int = 0


def binary_placeholder(entry: Entry) -> str:
    return f"Binary file: {entry.name}"


def special_file_placeholder(entry: Entry) -> str:
    return f"Not a regular file: {entry.name}"


def has_binary_extension(entry: Entry) -> bool:
    suffix = entry.path.suffix
    if not suffix:
        return False
    return suffix[1:].lower() in BINARY_EXTENSIONS


def truncation_marker(total_bytes: int) -> str:
    return f"...\n\n[File truncated - {total_bytes} bytes total]"


def load_preview_text(entry: Entry | None) -> str | None:
    """Return preview text for ``entry`` or ``None`` for directories.

    Read and decode failures degrade to ``UNREADABLE_PLACEHOLDER`` instead of
    raising. Only regular files are opened; pipes, sockets and devices get a
    placeholder since reading them can block.
    """
    if entry is None or entry.is_parent or entry.is_dir:
        return None
    if has_binary_extension(entry):
        return binary_placeholder(entry)

    try:
        if not stat.S_ISREG(entry.path.stat().st_mode):
            return special_file_placeholder(entry)
        raw = entry.path.read_bytes()
        content = raw.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("preview read failed for %s: %s", entry.path, exc)
        return UNREADABLE_PLACEHOLDER

    if "\x00" in content:
        return binary_placeholder(entry)
    if len(raw) > PREVIEW_MAX_BYTES:
        # ``raw`` is valid UTF-8, so ignoring errors only drops a split trailing character.
        head = raw[:PREVIEW_MAX_BYTES].decode("utf-8", errors="ignore")
        return head + truncation_marker(len(raw))
    return content


def load_preview(entry: Entry | None) -> PreviewState:
    """Build a fresh preview for ``entry`` with the scroll offset reset."""
    return PreviewState(text=load_preview_text(entry), scroll=0)


def scroll_down(preview: PreviewState, step: int = PREVIEW_SCROLL_STEP) -> bool:
    """Advance the preview offset; the renderer stops at the last line."""
    if preview.text is None:
        return False
    preview.scroll += step
    return True


def scroll_up(preview: PreviewState, step: int = PREVIEW_SCROLL_STEP) -> bool:
    if preview.text is None:
        return False
    previous = preview.scroll
    preview.scroll = max(0, preview.scroll - step)
    return preview.scroll != previous
