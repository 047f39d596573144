"""Focus/mode transition function.

Applies one key event to ``InteractionState`` in place. Normal mode reads
keys as commands; insert mode hands them to the input buffer and only
intercepts ``ESC``. Unknown keys are no-ops, never errors.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..state import InteractionState, Mode, next_focus, prev_focus
from .events import KeyEvent

logger = logging.getLogger(__name__)


def _quit(state: InteractionState) -> None:
    state.should_exit = True


def _enter_insert(state: InteractionState) -> None:
    state.mode = Mode.INSERT


def _focus_next(state: InteractionState) -> None:
    state.focus = next_focus(state.focus)


def _focus_prev(state: InteractionState) -> None:
    state.focus = prev_focus(state.focus)


NORMAL_MODE_COMMANDS: dict[str, Callable[[InteractionState], None]] = {
    "q": _quit,
    "i": _enter_insert,
    "TAB": _focus_next,
    "SHIFT_TAB": _focus_prev,
}


def transition(state: InteractionState, event: KeyEvent) -> KeyEvent | None:
    """Apply ``event`` to ``state``.

    Returns ``event`` when it must be forwarded to the input buffer as text
    input (insert mode only), otherwise ``None``. Once ``should_exit`` is set
    every later event is ignored.
    """
    if state.should_exit or not event.is_press:
        return None

    if event.key == "ESC":
        state.mode = Mode.NORMAL
        return None

    if state.mode is Mode.INSERT:
        if event.is_text_input:
            return event
        return None

    command = NORMAL_MODE_COMMANDS.get(event.key)
    if command is None:
        return None
    if logger.isEnabledFor(logging.DEBUG):
        before = state.snapshot()
        command(state)
        logger.debug("key %r: %s -> %s", event.key, before, state.snapshot())
    else:
        command(state)
    return None
