"""Runtime composition layer for lazyirc.

Builds the initial state and session, wires loop callbacks, and starts the
loop inside the terminal controller's raw-mode scope.
"""

from __future__ import annotations

import logging
import shutil
import sys
from functools import partial

from ..render import write_frame
from ..session import LocalSession
from ..state import InteractionState
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .config import load_channels_pane_percent, load_messages_pane_percent, load_theme_name
from .loop import RuntimeLoopCallbacks, RuntimeLoopOptions, run_main_loop

logger = logging.getLogger(__name__)


def build_loop_options(theme_name: str | None, no_color: bool) -> RuntimeLoopOptions:
    """Resolve theme and pane split from CLI choice, then config, then defaults."""
    return RuntimeLoopOptions(
        theme=resolve_theme(theme_name or load_theme_name(), no_color=no_color),
        channels_percent=load_channels_pane_percent(),
        messages_percent=load_messages_pane_percent(),
    )


def run_client(
    session: LocalSession,
    theme_name: str | None = None,
    no_color: bool = False,
) -> InteractionState:
    """Run the interactive chat shell for ``session`` until the user quits.

    Returns the final interaction state. Terminal setup errors and input
    stream failures propagate to the caller after the terminal is restored.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    state = InteractionState()
    callbacks = RuntimeLoopCallbacks(
        content=session.content,
        forward_text=session.handle_text_input,
        terminal_size=partial(shutil.get_terminal_size, (80, 24)),
        write_frame=partial(write_frame, fd=stdout_fd),
    )
    options = build_loop_options(theme_name, no_color)

    logger.info(
        "starting session nickname=%s target=%s description=%r theme=%s",
        session.nickname,
        session.target,
        session.description,
        options.theme.name,
    )
    try:
        run_main_loop(state, terminal, stdin_fd, callbacks, options)
    except Exception:
        logger.exception("session aborted")
        raise
    logger.info("session closed")
    return state
