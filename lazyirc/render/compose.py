"""View composer: interaction state plus session content to region specs.

``compose`` is pure. It decides border/title emphasis and visible text for
the channels, messages and input regions, and emits styled spans by
semantic role so the painter can theme them. It never mutates its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..session import ChatContent, MessageRecord
from ..state import FocusTarget, InteractionState, Mode

CLIENT_NAME = "[ TUI IRC Client ]"
MESSAGE_PLACEHOLDER = "Enter your message..."
EMPTY_HISTORY_PLACEHOLDER = "No messages yet."


@dataclass(frozen=True)
class Span:
    text: str
    role: str


StyledLine = tuple[Span, ...]


@dataclass(frozen=True)
class RegionSpec:
    """Decoration and body of one screen region.

    ``title`` is the plain title text. ``title_spans`` optionally carries the
    same text split by role for painting. ``title_align`` is ``"left"`` or
    ``"right"`` and applies to the title together with ``secondary_title``.
    """

    title: str
    border_emphasis: bool
    title_emphasis: bool
    visible_text: str
    lines: tuple[StyledLine, ...] = ()
    secondary_title: str = ""
    centered: bool = False
    title_spans: StyledLine = ()
    title_align: str = "left"


@dataclass(frozen=True)
class RegionSpecs:
    channels: RegionSpec
    messages: RegionSpec
    input: RegionSpec


def _plain_text(lines: tuple[StyledLine, ...]) -> str:
    return "\n".join("".join(span.text for span in line) for line in lines)


def _pane_emphasized(state: InteractionState, pane: FocusTarget) -> bool:
    return state.mode is Mode.NORMAL and state.focus is pane


def compose_channels(state: InteractionState, content: ChatContent) -> RegionSpec:
    active = _pane_emphasized(state, FocusTarget.CHANNELS)
    role = "body_active" if active else "body"
    lines = tuple((Span(name, role),) for name in content.channels)
    return RegionSpec(
        title=f"[ Channels: {len(content.channels)} ]",
        border_emphasis=active,
        title_emphasis=active,
        visible_text=_plain_text(lines),
        lines=lines,
    )


def _message_line(message: MessageRecord) -> StyledLine:
    return (
        Span(f"{message.timestamp} ", "timestamp"),
        Span(f"{message.author}: ", "author"),
        Span(message.text, "message"),
    )


def compose_messages(state: InteractionState, content: ChatContent) -> RegionSpec:
    active = _pane_emphasized(state, FocusTarget.MESSAGES)
    title_role = "title_active" if active else "title"
    nick_role = "nickname_active" if active else "nickname"
    if content.messages:
        lines = tuple(_message_line(message) for message in content.messages)
    else:
        lines = ((Span(EMPTY_HISTORY_PLACEHOLDER, "placeholder"),),)
    return RegionSpec(
        title=f"[ {content.nickname} ]",
        border_emphasis=active,
        title_emphasis=active,
        visible_text=_plain_text(lines),
        lines=lines,
        secondary_title=CLIENT_NAME,
        title_spans=(
            Span("[ ", title_role),
            Span(content.nickname, nick_role),
            Span(" ]", title_role),
        ),
        title_align="right",
    )


def compose_input(state: InteractionState, content: ChatContent) -> RegionSpec:
    # Insert mode emphasizes the input pane even when focus points elsewhere.
    active = state.mode is Mode.INSERT or _pane_emphasized(state, FocusTarget.INPUT)
    if content.draft:
        text, role = content.draft, "message"
    elif state.mode is Mode.INSERT:
        text, role = "", "message"
    else:
        text = MESSAGE_PLACEHOLDER
        role = "placeholder_active" if active else "placeholder"
    lines = ((Span(text, role),),)
    return RegionSpec(
        title="",
        border_emphasis=active,
        title_emphasis=active,
        visible_text=text,
        lines=lines,
        centered=not content.draft,
    )


def compose(state: InteractionState, content: ChatContent) -> RegionSpecs:
    """Compose decoration descriptors for all three regions."""
    return RegionSpecs(
        channels=compose_channels(state, content),
        messages=compose_messages(state, content),
        input=compose_input(state, content),
    )
