"""Status-line help text for each input mode."""

from __future__ import annotations

from ..state import MODE_INSERT

NORMAL_HELP = (
    "j/k: navigate | h/l: scroll preview | Enter: open | i/: insert mode"
    " | gg/G: top/bottom | q: quit | Esc: clear filter"
)
INSERT_HELP = "Type to filter | Enter: open | Esc: normal mode | Backspace: delete char"


def mode_label(mode: str) -> str:
    return "INSERT" if mode == MODE_INSERT else "NORMAL"


def help_text_for_mode(mode: str) -> str:
    return INSERT_HELP if mode == MODE_INSERT else NORMAL_HELP


def status_line_text(mode: str, query: str) -> str:
    """Compose ``-- MODE -- | Filter: <query> | <help>`` for the footer."""
    shown_query = query if query else "<empty>"
    return f"-- {mode_label(mode)} -- | Filter: {shown_query} | {help_text_for_mode(mode)}"
