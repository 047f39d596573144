"""CLI startup-surface tests.

Verifies argument validation happens before any terminal change and that
valid arguments reach the client runtime with the expected session.
"""

from __future__ import annotations

import io
import sys
import tempfile
import termios
import unittest
from contextlib import redirect_stderr
from pathlib import Path
from unittest import mock

from lazyirc import cli
from lazyirc.ansi import display_width


class CliUsageTests(unittest.TestCase):
    def _expect_usage_exit(self, argv: list[str]) -> str:
        stderr = io.StringIO()
        with mock.patch("lazyirc.cli.run_client") as run_client, mock.patch(
            "lazyirc.terminal.tty.setraw"
        ) as setraw, redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(argv)
        self.assertEqual(ctx.exception.code, 2)
        run_client.assert_not_called()
        setraw.assert_not_called()
        return stderr.getvalue()

    def test_missing_arguments_print_usage(self) -> None:
        for argv in ([], ["nick"], ["nick", "host"]):
            output = self._expect_usage_exit(argv)
            self.assertIn("usage: lazyirc", output)

    def test_non_numeric_port_is_rejected(self) -> None:
        output = self._expect_usage_exit(["nick", "host", "six"])
        self.assertIn("invalid integer value", output)

    def test_out_of_range_port_is_rejected(self) -> None:
        self._expect_usage_exit(["nick", "host", "70000"])
        self._expect_usage_exit(["nick", "host", "0"])

    def test_unknown_theme_is_rejected(self) -> None:
        self._expect_usage_exit(["nick", "host", "6667", "--theme", "neon"])

    def test_save_theme_without_theme_is_rejected(self) -> None:
        with mock.patch("lazyirc.cli.save_theme_name") as save_theme_name, mock.patch(
            "lazyirc.cli.configure_logging"
        ) as configure_logging:
            output = self._expect_usage_exit(["nick", "host", "6667", "--save-theme"])
        self.assertIn("--save-theme requires --theme", output)
        save_theme_name.assert_not_called()
        configure_logging.assert_not_called()

    def test_unusable_log_file_is_a_usage_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "not-a-dir"
            blocker.write_text("", encoding="utf-8")
            log_file = blocker / "lazyirc.log"
            output = self._expect_usage_exit(["nick", "host", "6667", "--render", "--log-file", str(log_file)])
        self.assertIn("cannot open log file", output)


class CliLaunchTests(unittest.TestCase):
    def test_valid_arguments_launch_client_with_session(self) -> None:
        with mock.patch("lazyirc.cli.run_client") as run_client, mock.patch.object(
            sys.stdin, "isatty", return_value=True
        ):
            cli.main(["makefolder", "irc.example.org", "6667", "just", "testing", "--theme", "ocean"])

        run_client.assert_called_once()
        session = run_client.call_args.args[0]
        self.assertEqual(session.nickname, "makefolder")
        self.assertEqual(session.host, "irc.example.org")
        self.assertEqual(session.port, 6667)
        self.assertEqual(session.description, "just testing")
        self.assertEqual(run_client.call_args.kwargs, {"theme_name": "ocean", "no_color": False})

    def test_save_theme_persists_chosen_theme(self) -> None:
        with mock.patch("lazyirc.cli.run_client"), mock.patch(
            "lazyirc.cli.save_theme_name"
        ) as save_theme_name, mock.patch.object(sys.stdin, "isatty", return_value=True):
            cli.main(["nick", "host", "6667", "--theme", "ocean", "--save-theme"])

        save_theme_name.assert_called_once_with("ocean")

    def test_non_tty_stdin_exits_without_starting_client(self) -> None:
        with mock.patch("lazyirc.cli.run_client") as run_client, mock.patch.object(
            sys.stdin, "isatty", return_value=False
        ):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["nick", "host", "6667"])
        self.assertIn("not a terminal", str(ctx.exception.code))
        run_client.assert_not_called()

    def test_terminal_errors_become_nonzero_exit(self) -> None:
        with mock.patch(
            "lazyirc.cli.run_client", side_effect=termios.error(25, "Inappropriate ioctl")
        ), mock.patch.object(sys.stdin, "isatty", return_value=True):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["nick", "host", "6667"])
        self.assertIn("terminal error", str(ctx.exception.code))

    def test_render_prints_initial_frame_without_runtime(self) -> None:
        stdout = io.StringIO()
        with mock.patch("lazyirc.cli.run_client") as run_client, mock.patch(
            "lazyirc.cli.load_theme_name", return_value=None
        ), mock.patch("lazyirc.cli.load_channels_pane_percent", return_value=25.0), mock.patch(
            "lazyirc.cli.load_messages_pane_percent", return_value=95.0
        ), mock.patch.object(sys, "stdout", stdout):
            cli.main(["makefolder", "host", "6667", "--render", "--no-color", "--max-cols", "80", "--max-rows", "24"])

        run_client.assert_not_called()
        rows = stdout.getvalue().splitlines()
        self.assertEqual(len(rows), 24)
        self.assertTrue(all(display_width(row) == 80 for row in rows))
        self.assertIn("[ makefolder ]", rows[0])
        self.assertIn("┏", rows[0])
        self.assertTrue(any("Enter your message..." in row for row in rows))


if __name__ == "__main__":
    unittest.main()
