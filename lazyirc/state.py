"""Interaction state for the chat shell.

Holds the focused pane, the interaction mode, and the exit flag.
Focus order is data (``FOCUS_RING``); next/prev are index arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FocusTarget(Enum):
    """Pane receiving pane-specific bindings and visual emphasis."""

    MESSAGES = "messages"
    INPUT = "input"
    CHANNELS = "channels"


class Mode(Enum):
    """Global interaction mode: commands (normal) or text entry (insert)."""

    NORMAL = "normal"
    INSERT = "insert"


FOCUS_RING: tuple[FocusTarget, ...] = (
    FocusTarget.MESSAGES,
    FocusTarget.INPUT,
    FocusTarget.CHANNELS,
)


def _ring_step(focus: FocusTarget, delta: int) -> FocusTarget:
    try:
        idx = FOCUS_RING.index(focus)
    except ValueError:
        return FOCUS_RING[0]
    return FOCUS_RING[(idx + delta) % len(FOCUS_RING)]


def next_focus(focus: FocusTarget) -> FocusTarget:
    """Return the pane after ``focus`` in ring order."""
    return _ring_step(focus, 1)


def prev_focus(focus: FocusTarget) -> FocusTarget:
    """Return the pane before ``focus`` in ring order."""
    return _ring_step(focus, -1)


@dataclass
class InteractionState:
    focus: FocusTarget = FocusTarget.MESSAGES
    mode: Mode = Mode.NORMAL
    should_exit: bool = False
    dirty: bool = True

    def snapshot(self) -> tuple[FocusTarget, Mode, bool]:
        """Return the transition-relevant fields as an immutable tuple."""
        return self.focus, self.mode, self.should_exit
