"""Keyboard dispatch facade selecting the handler for the current mode."""

from __future__ import annotations

from ..browser import DirectoryBrowser
from ..state import MODE_INSERT
from .key_insert import handle_insert_key
from .key_normal import handle_normal_key


def handle_key(key: str, browser: DirectoryBrowser) -> bool:
    """Route ``key`` by mode and return ``True`` when the session should end.

    Any pending status message is dismissed by the next key press.
    """
    state = browser.state
    if not key:
        return False
    if state.status_message:
        state.status_message = ""
        state.dirty = True
    if state.mode == MODE_INSERT:
        return handle_insert_key(key, browser)
    return handle_normal_key(key, browser)
