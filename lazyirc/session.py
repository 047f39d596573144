"""Chat-session collaborator: channel list, message history, input draft.

``LocalSession`` is an in-memory stand-in for a networked session. It never
sends or persists anything; submitted drafts are echoed into local history.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .input.events import KeyEvent

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL_NAME = "Channel #1"
PLACEHOLDER_MESSAGE = ("12:47:53", "author", "This text would be their long long message.")


@dataclass(frozen=True)
class MessageRecord:
    timestamp: str
    author: str
    text: str


@dataclass(frozen=True)
class ChatContent:
    """Read-only content supplied to the composer for one render cycle."""

    nickname: str
    channels: tuple[str, ...] = ()
    messages: tuple[MessageRecord, ...] = ()
    draft: str = ""


class DraftBuffer:
    """Text typed into the input pane but not yet submitted."""

    def __init__(self) -> None:
        self._chars: list[str] = []

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def insert(self, text: str) -> None:
        self._chars.extend(text)

    def backspace(self) -> None:
        if self._chars:
            self._chars.pop()

    def clear(self) -> None:
        self._chars.clear()


def _clock_timestamp() -> str:
    return time.strftime("%H:%M:%S")


@dataclass
class LocalSession:
    nickname: str
    host: str
    port: int
    description: str = ""
    channels: list[str] = field(default_factory=lambda: [DEFAULT_CHANNEL_NAME])
    messages: list[MessageRecord] = field(
        default_factory=lambda: [MessageRecord(*PLACEHOLDER_MESSAGE)]
    )
    draft: DraftBuffer = field(default_factory=DraftBuffer)
    clock: Callable[[], str] = _clock_timestamp

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"

    def content(self) -> ChatContent:
        """Return an immutable snapshot of current session content."""
        return ChatContent(
            nickname=self.nickname,
            channels=tuple(self.channels),
            messages=tuple(self.messages),
            draft=self.draft.text,
        )

    def submit_draft(self) -> MessageRecord | None:
        """Echo the draft into local history and clear it.

        Blank drafts are discarded without producing a message.
        """
        text = self.draft.text
        self.draft.clear()
        if not text.strip():
            return None
        record = MessageRecord(timestamp=self.clock(), author=self.nickname, text=text)
        self.messages.append(record)
        logger.info("local echo to %s (%d chars)", self.target, len(text))
        return record

    def handle_text_input(self, event: KeyEvent) -> None:
        """Apply one forwarded insert-mode key to the draft."""
        if event.key == "BACKSPACE":
            self.draft.backspace()
        elif event.key == "ENTER":
            self.submit_draft()
        elif event.is_printable:
            self.draft.insert(event.key)
