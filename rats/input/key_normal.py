"""Normal-mode keyboard handling."""

from __future__ import annotations

from ..browser import DirectoryBrowser
from ..state import MODE_INSERT
from .key_common import activate_selection, keep_running, quit_session
from .key_registry import KeyBinding, KeyMap

CHORD_FIRST = "g"


def handle_normal_key(key: str, browser: DirectoryBrowser) -> bool:
    """Handle one normal-mode key and return ``True`` when the session ends.

    ``g`` waits for a second ``g`` to jump to the first entry; any other key
    cancels the chord and is handled on its own.
    """
    state = browser.state

    if state.pending_keys == CHORD_FIRST:
        state.pending_keys = ""
        if key == CHORD_FIRST:
            browser.move_first()
            return False
    elif key == CHORD_FIRST:
        state.pending_keys = CHORD_FIRST
        return False

    def enter_insert_mode() -> None:
        state.mode = MODE_INSERT
        state.dirty = True

    bindings = KeyMap(
        KeyBinding(("q", "CTRL_C"), quit_session),
        KeyBinding(("i", "/"), keep_running(enter_insert_mode)),
        KeyBinding(("j", "DOWN"), keep_running(browser.move_next)),
        KeyBinding(("k", "UP"), keep_running(browser.move_previous)),
        KeyBinding(("h", "LEFT"), keep_running(browser.scroll_preview_up)),
        KeyBinding(("l", "RIGHT"), keep_running(browser.scroll_preview_down)),
        KeyBinding(("G",), keep_running(browser.move_last)),
        KeyBinding(("ESC",), keep_running(browser.clear_query)),
        KeyBinding(("ENTER",), lambda: activate_selection(browser)),
    )
    return bool(bindings.dispatch(key))
