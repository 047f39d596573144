"""Input-layer public API for key decoding and state transitions.

Exports are split between low-level terminal decoding (`read_key`)
and the focus/mode transition function used by the runtime loop.
"""

from .events import KeyEvent, KeyKind, press
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, _PENDING_BYTES, read_key
from .transition import NORMAL_MODE_COMMANDS, transition

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "KeyEvent",
    "KeyKind",
    "NORMAL_MODE_COMMANDS",
    "press",
    "transition",
]
