"""Core tick loop, scroll engine, collision resolution and game state."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Protocol
import logging

from .grid import DisplaySink, Grid, Occupant
from .settings import GameSettings
from .spawner import Spawner
from .utils import TITLE_PREFIX, Direction, clamp

logger = logging.getLogger(__name__)

PLAYER_COLUMN = 0
SCROLLING = (Occupant.OBSTACLE, Occupant.REWARD)


class GameState(Enum):
    """Finite states of a single game."""

    RUNNING = auto()
    GAME_OVER = auto()


def scroll_left(grid: Grid) -> None:
    """Shift every obstacle and reward one column left.

    Objects already in column 0 leave the board. The player marker is never
    moved, but an object can be shifted on top of it; callers resolve the
    player's cell afterwards.
    """
    for row in range(grid.rows):
        for col in range(grid.cols):
            occupant = grid.get_occupant(row, col)
            if occupant not in SCROLLING:
                continue
            grid.set_occupant(row, col, Occupant.EMPTY)
            if col > 0:
                grid.set_occupant(row, col - 1, occupant)


class InputSource(Protocol):
    """Anything the loop can read one direction per tick from."""

    closed: bool

    def poll_direction(self) -> Direction: ...


class ScrollingGame(Protocol):
    """Capabilities the tick loop drives."""

    player_row: int
    direction: Direction

    def clear_player(self) -> None: ...

    def move(self) -> None: ...

    def mark_player(self) -> None: ...

    def scroll_due(self) -> bool: ...

    def scroll_left(self) -> None: ...

    def populate_right_edge(self) -> None: ...

    def handle_collision(self, row: int, col: int) -> None: ...

    def update_title(self) -> None: ...

    def advance_clock(self) -> None: ...

    def check_termination(self) -> GameState: ...

    def is_game_over(self) -> bool: ...

    @property
    def score(self) -> int: ...


class SideScroller:
    """Game state for one run: the grid, the player row, counters and clock."""

    def __init__(
        self,
        settings: GameSettings | None = None,
        display: DisplaySink | None = None,
        spawner: Spawner | None = None,
    ) -> None:
        self.settings = settings or GameSettings()
        self.settings.validate()
        self.display = display
        self.grid = Grid(self.settings.rows, self.settings.cols, observer=display)
        self.spawner = spawner or Spawner(
            obstacle_probability=self.settings.obstacle_probability,
            reward_probability=self.settings.reward_probability,
        )

        self.player_row = self.settings.start_row
        self.direction = Direction.NONE
        self.elapsed_ms = 0
        self.times_get = 0
        self.times_avoid = 0
        self.state = GameState.RUNNING

        self.mark_player()
        self.update_title()

    @property
    def score(self) -> int:
        """Rewards consumed; obstacles never subtract."""
        return self.times_get

    def clear_player(self) -> None:
        self.grid.set_occupant(self.player_row, PLAYER_COLUMN, Occupant.EMPTY)

    def mark_player(self) -> None:
        self.grid.set_occupant(self.player_row, PLAYER_COLUMN, Occupant.PLAYER)

    def move(self) -> None:
        """Apply the pending direction, resolving whatever sits in a newly entered cell."""
        row = clamp(self.player_row + self.direction.value, 0, self.grid.rows - 1)
        if row == self.player_row:
            return
        self.player_row = row
        self.handle_collision(row, PLAYER_COLUMN)

    def scroll_due(self) -> bool:
        return self.elapsed_ms % self.settings.wait_time_ms == 0

    def scroll_left(self) -> None:
        scroll_left(self.grid)

    def populate_right_edge(self) -> None:
        self.spawner.spawn(self.grid)

    def handle_collision(self, row: int, col: int) -> None:
        """Consume a reward or obstacle at a location and update the counters."""
        occupant = self.grid.get_occupant(row, col)
        if occupant is Occupant.REWARD:
            self.times_get += 1
        elif occupant is Occupant.OBSTACLE:
            self.times_avoid += 1
        else:
            return
        self.grid.set_occupant(row, col, Occupant.EMPTY)
        logger.debug(
            "Hit %s at (%d, %d): get=%d avoid=%d",
            occupant.value,
            row,
            col,
            self.times_get,
            self.times_avoid,
        )

    def update_title(self) -> None:
        if self.display is not None:
            self.display.set_title(f"{TITLE_PREFIX}{self.score}")

    def advance_clock(self) -> None:
        self.elapsed_ms += self.settings.tick_ms

    def check_termination(self) -> GameState:
        """Move to GAME_OVER once enough obstacles were hit."""
        if self.state is GameState.RUNNING and self.times_avoid >= self.settings.loss_threshold:
            self.state = GameState.GAME_OVER
            logger.info("Game over after %dms with score %d", self.elapsed_ms, self.score)
        return self.state

    def is_game_over(self) -> bool:
        return self.state is GameState.GAME_OVER


def run_tick(game: ScrollingGame, direction: Direction) -> GameState:
    """Advance the game by exactly one tick.

    A game that is already over is left untouched.
    """
    if game.is_game_over():
        return GameState.GAME_OVER

    game.clear_player()
    game.direction = direction
    game.move()
    game.direction = Direction.NONE
    # Overwrites the cell without a collision check when the row did not change.
    game.mark_player()

    if game.scroll_due():
        game.scroll_left()
        game.populate_right_edge()
        game.handle_collision(game.player_row, PLAYER_COLUMN)
        game.mark_player()

    game.update_title()
    game.advance_clock()
    return game.check_termination()


def play(
    game: ScrollingGame,
    controls: InputSource,
    pace: Callable[[], object] | None = None,
    refresh: Callable[[], None] | None = None,
) -> int:
    """Run ticks until the game is over or the input source closes; return the score."""
    logger.info("Game started")
    while not game.is_game_over():
        if pace is not None:
            pace()
        direction = controls.poll_direction()
        if controls.closed:
            logger.info("Input closed, stopping with score %d", game.score)
            break
        run_tick(game, direction)
        if refresh is not None:
            refresh()
    return game.score
