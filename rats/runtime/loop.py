"""Main interactive event loop for the terminal UI.

Each iteration re-measures the terminal, redraws when the state is dirty or
the size changed, then waits for one key and dispatches it by mode.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..browser import DirectoryBrowser
from ..input import handle_key, read_key
from ..render import RenderContext, clamp_list_start, compute_left_width, render_frame, visible_list_rows
from ..ui_theme import UITheme
from .terminal import TerminalController

RESIZE_POLL_MS = 200


def current_terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size((80, 24))
    return size.columns, size.lines


@dataclass(frozen=True)
class RuntimeLoopOptions:
    """Presentation settings plus injectable terminal I/O for tests."""

    theme: UITheme
    left_pane_percent: float
    read_key: Callable[[int, int | None], str] = read_key
    render: Callable[[RenderContext, int | None], None] = render_frame
    terminal_size: Callable[[], tuple[int, int]] = current_terminal_size


def run_main_loop(
    browser: DirectoryBrowser,
    terminal: TerminalController,
    stdin_fd: int,
    options: RuntimeLoopOptions,
) -> Path | None:
    """Run the session until a file is chosen or the user quits.

    Returns the chosen file path, or ``None`` on quit or closed input.
    """
    state = browser.state
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            columns, lines = options.terminal_size()
            state.list_start = clamp_list_start(
                state.cursor,
                state.list_start,
                visible_list_rows(lines),
                len(state.ranked),
            )
            if state.dirty or (columns, lines) != last_size:
                context = RenderContext.from_state(
                    state,
                    width=columns,
                    height=lines,
                    left_width=compute_left_width(columns, options.left_pane_percent),
                    theme=options.theme,
                )
                options.render(context, terminal.stdout_fd)
                state.dirty = False
                last_size = (columns, lines)

            try:
                key = options.read_key(stdin_fd, RESIZE_POLL_MS)
            except EOFError:
                return None
            if handle_key(key, browser):
                return state.selected_path
