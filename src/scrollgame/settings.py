"""Settings persistence and runtime configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path

from .utils import SETTINGS_FILE, load_json, save_json


@dataclass(slots=True)
class DisplaySettings:
    """Display-related options, never read by the simulation."""

    show_grid_lines: bool = False
    background_image: str | None = None
    player_image: str = "ship.gif"
    obstacle_image: str = "asteroid.gif"
    reward_image: str = "burger.gif"


@dataclass(slots=True)
class GameSettings:
    """Tunable parameters of a single game."""

    rows: int = 10
    cols: int = 15
    tick_ms: int = 100
    wait_time_ms: int = 400
    loss_threshold: int = 3
    obstacle_probability: float = 0.4
    reward_probability: float = 0.2
    start_row: int = 0
    display: DisplaySettings = field(default_factory=DisplaySettings)

    def validate(self) -> None:
        """Raise ValueError when the parameters cannot describe a playable game."""
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")
        if self.cols < 2:
            raise ValueError("Grid needs at least two columns to scroll objects toward the player")
        if self.tick_ms <= 0 or self.wait_time_ms <= 0:
            raise ValueError("Tick and wait time must be positive")
        if self.wait_time_ms % self.tick_ms != 0:
            raise ValueError(
                f"Wait time {self.wait_time_ms}ms is not a multiple of the {self.tick_ms}ms tick"
            )
        if self.loss_threshold <= 0:
            raise ValueError("Loss threshold must be positive")
        if self.obstacle_probability < 0 or self.reward_probability < 0:
            raise ValueError("Spawn probabilities cannot be negative")
        if self.obstacle_probability + self.reward_probability > 1:
            raise ValueError("Spawn probabilities cannot sum above 1")
        if not 0 <= self.start_row < self.rows:
            raise ValueError(f"Start row {self.start_row} is outside [0, {self.rows})")


class SettingsManager:
    """Load and save game settings."""

    def __init__(self, path: Path = SETTINGS_FILE) -> None:
        self.path = path
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = load_json(self.path, {})
        if not isinstance(raw, dict):
            raw = {}
        settings = GameSettings()

        settings.rows = int(raw.get("rows", settings.rows))
        settings.cols = int(raw.get("cols", settings.cols))
        settings.tick_ms = int(raw.get("tick_ms", settings.tick_ms))
        settings.wait_time_ms = int(raw.get("wait_time_ms", settings.wait_time_ms))
        settings.loss_threshold = int(raw.get("loss_threshold", settings.loss_threshold))
        settings.obstacle_probability = float(
            raw.get("obstacle_probability", settings.obstacle_probability)
        )
        settings.reward_probability = float(raw.get("reward_probability", settings.reward_probability))
        settings.start_row = int(raw.get("start_row", settings.start_row))

        display = raw.get("display", {})
        if not isinstance(display, dict):
            display = {}
        settings.display.show_grid_lines = bool(
            display.get("show_grid_lines", settings.display.show_grid_lines)
        )
        settings.display.background_image = display.get(
            "background_image", settings.display.background_image
        )
        settings.display.player_image = str(display.get("player_image", settings.display.player_image))
        settings.display.obstacle_image = str(
            display.get("obstacle_image", settings.display.obstacle_image)
        )
        settings.display.reward_image = str(display.get("reward_image", settings.display.reward_image))

        settings.validate()
        return settings

    def save(self) -> None:
        """Persist settings to disk."""
        save_json(self.path, asdict(self.settings))
