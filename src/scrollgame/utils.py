"""Shared constants and utility helpers for the scrolling game."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Tuple
import json

Color = Tuple[int, int, int]

MAX_WINDOW_PIXELS = 750
TITLE_PREFIX = "Game Score:  "

BLACK: Color = (0, 0, 0)
LINE_COLOR: Color = (40, 40, 60)
CYAN: Color = (30, 242, 255)
RED: Color = (255, 85, 85)
YELLOW: Color = (255, 233, 68)


class Direction(int, Enum):
    """Vertical movement request, expressed as a row delta."""

    UP = -1
    NONE = 0
    DOWN = 1


DATA_DIR = Path(".scrollgame")
SETTINGS_FILE = DATA_DIR / "settings.json"


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Clamp a value into a closed interval."""
    return max(minimum, min(maximum, value))


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, OSError):
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
