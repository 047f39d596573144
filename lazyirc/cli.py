"""Command-line front door for lazyirc.

Parses the nickname/host/port startup surface and configures logging.
Usage errors exit before the terminal is touched; then dispatches into the
interactive client runtime.
"""

from __future__ import annotations

import argparse
import shutil
import sys
import termios
from pathlib import Path

from .render import MIN_REGION_ROWS, render_screen
from .runtime import run_client
from .runtime.config import (
    load_channels_pane_percent,
    load_log_level,
    load_messages_pane_percent,
    load_theme_name,
    save_theme_name,
)
from .runtime.logs import configure_logging
from .session import LocalSession
from .state import InteractionState
from .ui_theme import available_theme_names, resolve_theme

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _port(value: str) -> int:
    """argparse type for TCP port numbers."""
    parsed = _positive_int(value)
    if parsed > 65535:
        raise argparse.ArgumentTypeError("port must be <= 65535")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyirc",
        description="Terminal chat client with channel, message and input panes.",
    )
    parser.add_argument("nickname", help="Nickname shown in the message pane title.")
    parser.add_argument("host", help="Chat server host.")
    parser.add_argument("port", type=_port, help="Chat server port.")
    parser.add_argument("description", nargs="*", help="Optional free-text description (real name).")
    parser.add_argument(
        "--theme",
        default=None,
        choices=available_theme_names(),
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--save-theme",
        action="store_true",
        help="Persist --theme as the default theme in the config file.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--render", action="store_true", help="Print the initial screen and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument(
        "--max-rows",
        type=_positive_int,
        default=None,
        help="Row count for --render output (default: terminal height).",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=LOG_LEVEL_NAMES,
        help="Log level for --log-file (default: config or WARNING).",
    )
    return parser


def render_initial_screen(
    session: LocalSession,
    theme_name: str | None,
    no_color: bool,
    columns: int,
    rows: int,
) -> str:
    """Render the startup frame for ``session`` as newline-joined text."""
    lines = render_screen(
        InteractionState(),
        session.content(),
        columns,
        rows,
        resolve_theme(theme_name or load_theme_name(), no_color=no_color),
        channels_percent=load_channels_pane_percent(),
        messages_percent=load_messages_pane_percent(),
        min_input_rows=MIN_REGION_ROWS,
    )
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the chat shell.

    Malformed arguments print usage and exit with status 2 through argparse
    before any terminal mode change.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.save_theme and args.theme is None:
        parser.error("--save-theme requires --theme")

    try:
        configure_logging(args.log_file, args.log_level or load_log_level())
    except OSError as exc:
        parser.error(f"cannot open log file: {exc}")

    if args.save_theme:
        save_theme_name(args.theme)
    session = LocalSession(
        nickname=args.nickname,
        host=args.host,
        port=args.port,
        description=" ".join(args.description),
    )

    if args.render:
        term = shutil.get_terminal_size((80, 24))
        columns = args.max_cols if args.max_cols is not None else term.columns
        rows = args.max_rows if args.max_rows is not None else term.lines
        sys.stdout.write(render_initial_screen(session, args.theme, args.no_color, columns, rows))
        return

    if not sys.stdin.isatty():
        raise SystemExit("lazyirc: stdin is not a terminal")

    try:
        run_client(session, theme_name=args.theme, no_color=args.no_color)
    except (termios.error, EOFError) as exc:
        raise SystemExit(f"lazyirc: terminal error: {exc}") from exc


if __name__ == "__main__":
    main()
