"""Persistent JSON config helpers.

Stores theme choice, pane split percentages, and the default log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..render.layout import CHANNELS_WIDTH_PERCENT, MESSAGES_HEIGHT_PERCENT
from ..ui_theme import is_known_theme

APP_NAME = "lazyirc"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored so an
    unwritable config never interrupts a chat session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not save config to %s: %s", CONFIG_PATH, exc)


def _load_percent(key: str, default: int) -> float:
    """Read a percentage constrained to the open interval (0, 100)."""
    value = load_config().get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return float(default)
    if value <= 0 or value >= 100:
        return float(default)
    return float(value)


def load_channels_pane_percent() -> float:
    """Load the channel-list width share of the screen."""
    return _load_percent("channels_pane_percent", CHANNELS_WIDTH_PERCENT)


def load_messages_pane_percent() -> float:
    """Load the message-view height share of the right column."""
    return _load_percent("messages_pane_percent", MESSAGES_HEIGHT_PERCENT)


def load_theme_name() -> str | None:
    """Return the persisted theme name when it names a known theme."""
    value = load_config().get("theme")
    if isinstance(value, str) and is_known_theme(value):
        return value
    return None


def save_theme_name(name: str) -> None:
    config = load_config()
    config["theme"] = name
    save_config(config)


def load_log_level() -> str:
    value = load_config().get("log_level")
    if isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int):
        return value.upper()
    return DEFAULT_LOG_LEVEL
