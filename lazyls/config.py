"""Listing options and persistent JSON defaults.

Stores the preferred theme, sort field, size format, and time style.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from platformdirs import user_config_dir

from .render.grid import Direction
from .render.size import SizeFormat
from .render.times import TimeStyle, TimeType
from .sort import SortField

logger = logging.getLogger(__name__)

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


class OutputMode(Enum):
    GRID = "grid"
    DETAILS = "details"
    GRID_DETAILS = "grid-details"
    LINES = "lines"


@dataclass(frozen=True)
class ListingOptions:
    """Everything that decides how a listing is ordered and drawn."""

    sort_field: SortField = SortField.NAME
    reverse: bool = False
    size_format: SizeFormat = SizeFormat.DECIMAL
    mode: OutputMode = OutputMode.GRID
    across: bool = False
    header: bool = False
    tree: bool = False
    tree_depth: int | None = None
    git: bool = False
    inode: bool = False
    links: bool = False
    blocks: bool = False
    group: bool = False
    time_type: TimeType = TimeType.MODIFIED
    time_style: TimeStyle = TimeStyle.DEFAULT
    show_all: bool = False
    theme: str | None = None
    no_color: bool = False

    @property
    def direction(self) -> Direction:
        return Direction.LEFT_TO_RIGHT if self.across else Direction.TOP_TO_BOTTOM


@dataclass(frozen=True)
class SavedDefaults:
    """Defaults read from the config file; ``None`` means unset or invalid."""

    theme: str | None = None
    sort_field: SortField | None = None
    size_format: SizeFormat | None = None
    time_style: TimeStyle | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON.

    Filesystem and serialization errors are logged and reported through the
    return value rather than raised.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)
        return False
    return True


def _enum_value(enum_type, value: object):
    if not isinstance(value, str):
        return None
    try:
        return enum_type(value.strip().lower())
    except ValueError:
        logger.debug("ignoring invalid %s value %r", enum_type.__name__, value)
        return None


def _theme_name(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_defaults() -> SavedDefaults:
    data = load_config()
    return SavedDefaults(
        theme=_theme_name(data.get("theme")),
        sort_field=_enum_value(SortField, data.get("sort")),
        size_format=_enum_value(SizeFormat, data.get("size_format")),
        time_style=_enum_value(TimeStyle, data.get("time_style")),
    )


def save_defaults(options: ListingOptions) -> bool:
    """Persist the theme, sort field, size format, and time style of ``options``."""
    config = load_config()
    if options.theme:
        config["theme"] = options.theme
    config["sort"] = options.sort_field.value
    config["size_format"] = options.size_format.value
    config["time_style"] = options.time_style.value
    return save_config(config)


__all__ = [
    "CONFIG_PATH",
    "ListingOptions",
    "OutputMode",
    "SavedDefaults",
    "load_config",
    "load_defaults",
    "save_config",
    "save_defaults",
]
