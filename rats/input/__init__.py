"""Input-layer public API for key decoding and mode handlers.

Split between low-level terminal decoding (`read_key`) and the Normal/Insert
handlers that translate key tokens into browser operations.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .key_insert import handle_insert_key, is_query_character
from .key_normal import handle_normal_key
from .key_registry import KeyBinding, KeyMap
from .keys import handle_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyMap",
    "handle_key",
    "handle_insert_key",
    "handle_normal_key",
    "is_query_character",
]
