"""Key event value types.

Keys are normalized string tokens: single printable characters or
upper-case names such as ``TAB``, ``SHIFT_TAB`` and ``ESC``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

TEXT_EDIT_KEYS = frozenset({"BACKSPACE", "ENTER"})


class KeyKind(Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key with its press/repeat/release kind."""

    key: str
    kind: KeyKind = KeyKind.PRESS

    @property
    def is_press(self) -> bool:
        return self.kind is KeyKind.PRESS

    @property
    def is_printable(self) -> bool:
        return len(self.key) == 1 and self.key.isprintable()

    @property
    def is_text_input(self) -> bool:
        """Return whether the key belongs to the input buffer in insert mode."""
        return self.is_printable or self.key in TEXT_EDIT_KEYS


def press(key: str) -> KeyEvent:
    """Build a press event for ``key``."""
    return KeyEvent(key=key, kind=KeyKind.PRESS)
