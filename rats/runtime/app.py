"""Runtime composition layer for rats.

Opens the starting directory, resolves presentation settings, and runs the
interactive loop on the controlling terminal.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..browser import DirectoryBrowser
from ..config import load_left_pane_percent, load_theme_name
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopOptions, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def open_browser(directory: Path, query: str = "") -> DirectoryBrowser:
    """Open the starting directory, aborting startup when it is unreadable."""
    try:
        return DirectoryBrowser.open(directory, query)
    except OSError as exc:
        logger.error("cannot open starting directory %s: %s", directory, exc)
        reason = exc.strerror or str(exc)
        raise SystemExit(f"Cannot open directory: {directory}: {reason}") from exc


def run_browser(
    directory: Path,
    query: str = "",
    theme_name: str | None = None,
    no_color: bool = False,
) -> Path | None:
    """Run one interactive session and return the chosen file, if any."""
    browser = open_browser(directory, query)
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise SystemExit("Interactive mode needs a terminal; use --json for batch output.")
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()

    theme = resolve_theme(theme_name if theme_name is not None else load_theme_name(), no_color=no_color)
    options = RuntimeLoopOptions(theme=theme, left_pane_percent=load_left_pane_percent())
    terminal = TerminalController(stdin_fd, stdout_fd)
    result = run_main_loop(browser, terminal, stdin_fd, options)
    logger.info("session ended with %s", result if result is not None else "no selection")
    return result
