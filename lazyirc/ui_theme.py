"""UI theme definitions and selection helpers.

Themes map the semantic span roles emitted by the composer (``border``,
``author``, ``placeholder`` ...) to ANSI SGR prefixes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame painter."""

    name: str
    reset: str
    background: str
    border: str
    border_active: str
    title: str
    title_active: str
    body: str
    body_active: str
    timestamp: str
    author: str
    message: str
    placeholder: str
    placeholder_active: str
    nickname: str = ""
    nickname_active: str = ""

    def style(self, role: str) -> str:
        """Return the SGR prefix for ``role``; unknown roles are unstyled."""
        value = getattr(self, role, "")
        return value if isinstance(value, str) and role != "name" else ""


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    background="\033[40m",
    border="\033[38;5;250m",
    border_active="\033[1;97m",
    title="\033[97m",
    title_active="\033[1;97m",
    body="\033[97m",
    body_active="\033[1;97m",
    timestamp="\033[3;90m",
    author="\033[1;97m",
    message="\033[97m",
    placeholder="\033[90m",
    placeholder_active="\033[1;97m",
    nickname="\033[3;97m",
    nickname_active="\033[1;3;97m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    background="\033[48;5;17m",
    border="\033[2;38;5;31m",
    border_active="\033[1;38;5;45m",
    title="\033[38;5;153m",
    title_active="\033[1;38;5;45m",
    body="\033[38;5;252m",
    body_active="\033[1;38;5;153m",
    timestamp="\033[3;38;5;110m",
    author="\033[1;38;5;117m",
    message="\033[38;5;252m",
    placeholder="\033[2;38;5;110m",
    placeholder_active="\033[1;38;5;153m",
    nickname="\033[3;38;5;153m",
    nickname_active="\033[1;3;38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    background="",
    border="",
    border_active="",
    title="",
    title_active="",
    body="",
    body_active="",
    timestamp="",
    author="",
    message="",
    placeholder="",
    placeholder_active="",
    nickname="",
    nickname_active="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def is_known_theme(name: str | None) -> bool:
    return bool(name) and str(name).strip().lower() in _THEMES


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "is_known_theme",
    "normalize_theme_name",
    "resolve_theme",
]
