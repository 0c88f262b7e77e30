"""Insert-mode keyboard handling: typed characters edit the query."""

from __future__ import annotations

from ..browser import DirectoryBrowser
from ..state import MODE_NORMAL
from .key_common import activate_selection, keep_running, quit_session
from .key_registry import KeyBinding, KeyMap


def is_query_character(key: str) -> bool:
    """Return whether ``key`` is a single typed character rather than a named token."""
    return len(key) == 1 and key.isprintable()


def handle_insert_key(key: str, browser: DirectoryBrowser) -> bool:
    """Handle one insert-mode key and return ``True`` when the session ends."""
    state = browser.state

    def leave_insert_mode() -> None:
        state.mode = MODE_NORMAL
        state.dirty = True

    bindings = KeyMap(
        KeyBinding(("CTRL_C",), quit_session),
        KeyBinding(("ESC",), keep_running(leave_insert_mode)),
        KeyBinding(("BACKSPACE",), keep_running(browser.pop_from_query)),
        KeyBinding(("CTRL_U",), keep_running(browser.clear_query)),
        KeyBinding(("DOWN",), keep_running(browser.move_next)),
        KeyBinding(("UP",), keep_running(browser.move_previous)),
        KeyBinding(("ENTER",), lambda: activate_selection(browser)),
    )
    handled = bindings.dispatch(key)
    if handled is not None:
        return handled
    if is_query_character(key):
        browser.append_to_query(key)
    return False
