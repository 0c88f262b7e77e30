"""Actions shared by normal and insert mode."""

from __future__ import annotations

from collections.abc import Callable

from ..browser import DirectoryBrowser
from ..file_tree_model import safe_path_text


def activate_selection(browser: DirectoryBrowser) -> bool:
    """Open the selected entry and return ``True`` when a file was chosen.

    A directory that cannot be read becomes a status message so the session
    keeps running on the previous listing.
    """
    state = browser.state
    target = browser.selected_entry()
    try:
        chosen = browser.activate_selection()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        name = safe_path_text(target.path) if target is not None else ""
        state.status_message = f"Cannot open {name}: {reason}"
        state.dirty = True
        return False
    if chosen is None:
        return False
    state.selected_path = chosen
    return True


def quit_session() -> bool:
    return True


def keep_running(action: Callable[[], object]) -> Callable[[], bool]:
    """Wrap a model operation as a key action that never ends the session."""

    def run() -> bool:
        action()
        return False

    return run
