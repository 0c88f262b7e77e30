"""Key-token to action tables shared by the mode handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyAction = Callable[[], bool | None]


@dataclass(frozen=True)
class KeyBinding:
    """One action reachable from any of ``keys``."""

    keys: tuple[str, ...]
    action: KeyAction


class KeyMap:
    """Exact-match dispatch table; later bindings override earlier ones."""

    def __init__(self, *bindings: KeyBinding) -> None:
        self._actions: dict[str, KeyAction] = {}
        for binding in bindings:
            for key in binding.keys:
                self._actions[key] = binding.action

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` means the key is unbound."""
        action = self._actions.get(key)
        if action is None:
            return None
        return action()
