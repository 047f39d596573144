"""Frame painter: region specs plus layout to ANSI screen rows.

Emphasized regions get heavy box borders and styled titles; plain regions
get light borders. Painting is presentation-only except ``write_frame``,
which emits the finished frame with a single write.
"""

from __future__ import annotations

import os

from ..ansi import clip_ansi_line, display_width
from ..ui_theme import UITheme
from .compose import RegionSpec, RegionSpecs, Span, StyledLine
from .layout import Rect, ScreenLayout

LIGHT_BOX = ("┌", "─", "┐", "│", "└", "┘")
HEAVY_BOX = ("┏", "━", "┓", "┃", "┗", "┛")
PADDING_COLS = 1


def _styled(theme: UITheme, role: str, text: str) -> str:
    prefix = theme.style(role)
    if not prefix or not text:
        return text
    return f"{prefix}{text}{theme.reset}{theme.background}"


def _title_spans(spec: RegionSpec, inner: int, title_role: str, border_role: str, fill: str) -> list[Span]:
    spans = list(spec.title_spans) if spec.title_spans else []
    if not spans and spec.title:
        spans = [Span(spec.title, title_role)]
    if spec.secondary_title:
        used = sum(display_width(span.text) for span in spans)
        gap = 1 if spans else 0
        if used + gap + display_width(spec.secondary_title) <= inner:
            if gap:
                spans.append(Span(fill, border_role))
            spans.append(Span(spec.secondary_title, title_role))
    return spans


def _top_border(spec: RegionSpec, width: int, theme: UITheme, box: tuple[str, ...]) -> str:
    border_role = "border_active" if spec.border_emphasis else "border"
    title_role = "title_active" if spec.title_emphasis else "title"
    remaining = width - 2

    label: list[str] = []
    for span in _title_spans(spec, remaining, title_role, border_role, box[1]):
        piece = clip_ansi_line(span.text, remaining)
        if not piece:
            break
        remaining -= display_width(piece)
        label.append(_styled(theme, span.role, piece))

    fill = _styled(theme, border_role, box[1] * remaining)
    middle = fill + "".join(label) if spec.title_align == "right" else "".join(label) + fill
    return _styled(theme, border_role, box[0]) + middle + _styled(theme, border_role, box[2])


def _body_text(line: StyledLine, width: int, theme: UITheme, centered: bool) -> str:
    parts: list[str] = []
    remaining = width
    for span in line:
        if remaining <= 0:
            break
        piece = clip_ansi_line(span.text, remaining)
        remaining -= display_width(piece)
        parts.append(_styled(theme, span.role, piece))
    used = width - remaining
    if centered:
        left = (width - used) // 2
        return " " * left + "".join(parts) + " " * (width - used - left)
    return "".join(parts) + " " * remaining


def paint_region(spec: RegionSpec, rect: Rect, theme: UITheme) -> list[str]:
    """Return ``rect.height`` rows, each exactly ``rect.width`` columns wide."""
    width, height = rect.width, rect.height
    if height <= 0:
        return []
    if width < 2 or height < 2:
        return [" " * max(0, width) for _ in range(height)]

    box = HEAVY_BOX if spec.border_emphasis else LIGHT_BOX
    border_role = "border_active" if spec.border_emphasis else "border"
    side = _styled(theme, border_role, box[3])
    content_width = max(0, width - 2 - 2 * PADDING_COLS)
    pad = " " * min(PADDING_COLS, max(0, (width - 2) // 2))
    if content_width == 0:
        pad = " " * (width - 2)

    rows = [_top_border(spec, width, theme, box)]
    for idx in range(height - 2):
        if content_width == 0:
            rows.append(f"{side}{pad}{side}")
            continue
        line = spec.lines[idx] if idx < len(spec.lines) else ()
        body = _body_text(line, content_width, theme, spec.centered)
        rows.append(f"{side}{pad}{body}{pad}{side}")
    rows.append(_styled(theme, border_role, f"{box[4]}{box[1] * (width - 2)}{box[5]}"))
    return rows


def paint_frame(specs: RegionSpecs, layout: ScreenLayout, theme: UITheme) -> list[str]:
    """Compose the three painted regions into full screen rows."""
    channels = paint_region(specs.channels, layout.channels, theme)
    messages = paint_region(specs.messages, layout.messages, theme)
    input_rows = paint_region(specs.input, layout.input, theme)
    right = messages + input_rows

    rows: list[str] = []
    for row in range(layout.height):
        left = channels[row] if row < len(channels) else ""
        rest = right[row] if row < len(right) else ""
        rows.append(f"{theme.background}{left}{rest}{theme.reset}")
    return rows


def write_frame(rows: list[str], fd: int | None = None) -> None:
    """Home the cursor, clear, and write ``rows`` in one ``os.write`` call."""
    out = "\033[H\033[J" + "\r\n".join(rows)
    target = fd if fd is not None else 1
    os.write(target, out.encode("utf-8", errors="replace"))
