"""Rendering for the three-pane chat screen.

``compose`` decides what each region shows, ``compute_layout`` decides
where it goes, and ``paint_frame``/``write_frame`` turn both into ANSI.
"""

from __future__ import annotations

from ..session import ChatContent
from ..state import InteractionState
from ..ui_theme import UITheme
from .compose import (
    CLIENT_NAME,
    EMPTY_HISTORY_PLACEHOLDER,
    MESSAGE_PLACEHOLDER,
    RegionSpec,
    RegionSpecs,
    Span,
    compose,
)
from .frame import paint_frame, paint_region, write_frame
from .layout import (
    CHANNELS_WIDTH_PERCENT,
    MESSAGES_HEIGHT_PERCENT,
    MIN_REGION_ROWS,
    Rect,
    ScreenLayout,
    compute_layout,
)


def render_screen(
    state: InteractionState,
    content: ChatContent,
    width: int,
    height: int,
    theme: UITheme,
    **layout_kwargs: float,
) -> list[str]:
    """Compose, lay out and paint one frame for the given screen size."""
    layout = compute_layout(width, height, **layout_kwargs)
    return paint_frame(compose(state, content), layout, theme)


__all__ = [
    "CHANNELS_WIDTH_PERCENT",
    "CLIENT_NAME",
    "EMPTY_HISTORY_PLACEHOLDER",
    "MESSAGES_HEIGHT_PERCENT",
    "MESSAGE_PLACEHOLDER",
    "MIN_REGION_ROWS",
    "Rect",
    "RegionSpec",
    "RegionSpecs",
    "ScreenLayout",
    "Span",
    "compose",
    "compute_layout",
    "paint_frame",
    "paint_region",
    "render_screen",
    "write_frame",
]
