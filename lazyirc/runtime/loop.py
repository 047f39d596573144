"""Main interactive event loop for the chat shell.

Alternates between painting a frame and blocking for one key event.
The loop is the only writer of ``InteractionState``; rendering reads it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyEvent, read_key, transition
from ..render import MIN_REGION_ROWS, render_screen
from ..session import ChatContent
from ..state import InteractionState
from ..ui_theme import UITheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    Keeping the loop callback-driven isolates the session and the drawing
    surface from the state machine and makes the loop easy to unit test.
    """

    content: Callable[[], ChatContent]
    forward_text: Callable[[KeyEvent], None]
    terminal_size: Callable[[], os.terminal_size]
    write_frame: Callable[[list[str]], None]


@dataclass(frozen=True)
class RuntimeLoopOptions:
    theme: UITheme
    channels_percent: float
    messages_percent: float
    read_timeout_ms: int | None = 250
    min_input_rows: int = MIN_REGION_ROWS


def render_state(
    state: InteractionState,
    content: ChatContent,
    size: os.terminal_size,
    options: RuntimeLoopOptions,
) -> list[str]:
    """Return painted rows for ``state`` at terminal ``size``."""
    return render_screen(
        state,
        content,
        size.columns,
        size.lines,
        options.theme,
        channels_percent=options.channels_percent,
        messages_percent=options.messages_percent,
        min_input_rows=options.min_input_rows,
    )


def process_event(
    state: InteractionState,
    event: KeyEvent,
    forward_text: Callable[[KeyEvent], None],
) -> None:
    """Apply one event to ``state`` and forward insert-mode text input."""
    forwarded = transition(state, event)
    if forwarded is not None:
        forward_text(forwarded)
    state.dirty = True


def run_main_loop(
    state: InteractionState,
    terminal,
    stdin_fd: int,
    callbacks: RuntimeLoopCallbacks,
    options: RuntimeLoopOptions,
) -> None:
    """Run the interactive loop until ``state.should_exit`` is set.

    Each received event is applied exactly once and in order. Reads time
    out periodically so terminal resizes repaint without a keypress. The
    terminal is restored by ``terminal.raw_mode()`` on every exit path,
    including ``EOFError`` from a closed input stream.
    """
    last_size: os.terminal_size | None = None
    with terminal.raw_mode():
        while not state.should_exit:
            size = callbacks.terminal_size()
            if size != last_size:
                last_size = size
                state.dirty = True
            if state.dirty:
                callbacks.write_frame(render_state(state, callbacks.content(), size, options))
                state.dirty = False

            event = read_key(stdin_fd, timeout_ms=options.read_timeout_ms)
            if not event.key:
                continue
            process_event(state, event, callbacks.forward_text)
    logger.info("main loop finished")
