"""Screen geometry for the three-pane chat layout.

Channels take the left ``CHANNELS_WIDTH_PERCENT`` of the screen; the right
column splits vertically between messages and the input field.
"""

from __future__ import annotations

from dataclasses import dataclass

CHANNELS_WIDTH_PERCENT = 25
MESSAGES_HEIGHT_PERCENT = 95
MIN_REGION_ROWS = 3


@dataclass(frozen=True)
class Rect:
    col: int
    row: int
    width: int
    height: int


@dataclass(frozen=True)
class ScreenLayout:
    width: int
    height: int
    channels: Rect
    messages: Rect
    input: Rect


def _clamp_percent(percent: float, default: int) -> float:
    if not 0 < percent < 100:
        return float(default)
    return float(percent)


def _split(total: int, percent: float) -> int:
    return int(total * percent / 100)


def compute_layout(
    width: int,
    height: int,
    channels_percent: float = CHANNELS_WIDTH_PERCENT,
    messages_percent: float = MESSAGES_HEIGHT_PERCENT,
    min_input_rows: int = 0,
) -> ScreenLayout:
    """Split a ``width`` x ``height`` screen into channel, message and input rects.

    Out-of-range percentages fall back to the defaults. The plain floor
    split is used unless ``min_input_rows`` is given; then the input rect
    grows to that many rows when the messages rect can keep as many.
    """
    width = max(0, width)
    height = max(0, height)
    channels_percent = _clamp_percent(channels_percent, CHANNELS_WIDTH_PERCENT)
    messages_percent = _clamp_percent(messages_percent, MESSAGES_HEIGHT_PERCENT)

    left_width = _split(width, channels_percent)
    right_width = width - left_width

    messages_height = _split(height, messages_percent)
    input_height = height - messages_height
    if input_height < min_input_rows and height >= 2 * min_input_rows:
        input_height = min_input_rows
        messages_height = height - input_height

    return ScreenLayout(
        width=width,
        height=height,
        channels=Rect(col=0, row=0, width=left_width, height=height),
        messages=Rect(col=left_width, row=0, width=right_width, height=messages_height),
        input=Rect(col=left_width, row=messages_height, width=right_width, height=input_height),
    )
