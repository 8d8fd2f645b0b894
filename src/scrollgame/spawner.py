"""Random placement of obstacles and rewards on the right edge."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random

from .grid import Grid, Occupant

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Spawner:
    """Decides once per scroll pass whether, and what, to drop in the last column."""

    obstacle_probability: float = 0.4
    reward_probability: float = 0.2
    rng: random.Random = field(default_factory=random.Random)

    def choose(self) -> Occupant:
        """Draw one outcome: obstacle, reward, or EMPTY for nothing."""
        roll = self.rng.random()
        if roll < self.obstacle_probability:
            return Occupant.OBSTACLE
        # Cumulative bound, rounded since 0.4 + 0.2 != 0.6 in floating point.
        if roll < round(self.obstacle_probability + self.reward_probability, 9):
            return Occupant.REWARD
        return Occupant.EMPTY

    def spawn(self, grid: Grid) -> tuple[int, Occupant] | None:
        """Place a new object at a random row of the rightmost column.

        Whatever already sits in the chosen cell is overwritten. Returns the
        row and kind placed, or None when the draw came up empty.
        """
        row = self.rng.randrange(grid.rows)
        kind = self.choose()
        if kind is Occupant.EMPTY:
            return None
        grid.set_occupant(row, grid.cols - 1, kind)
        logger.debug("Spawned %s at row %d", kind.value, row)
        return row, kind
