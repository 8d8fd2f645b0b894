from __future__ import annotations

import random

from scrollgame.grid import Grid, Occupant
from scrollgame.spawner import Spawner


class StubRandom(random.Random):
    """Random source pinned to one row and one roll."""

    def __init__(self, row: int, roll: float) -> None:
        super().__init__(0)
        self.row = row
        self.roll = roll

    def random(self) -> float:
        return self.roll

    def randrange(self, *args, **kwargs) -> int:
        return self.row


def test_low_roll_spawns_obstacle_in_last_column() -> None:
    grid = Grid(10, 15)
    result = Spawner(rng=StubRandom(row=4, roll=0.1)).spawn(grid)
    assert result == (4, Occupant.OBSTACLE)
    assert grid.get_occupant(4, 14) is Occupant.OBSTACLE


def test_middle_roll_spawns_reward() -> None:
    grid = Grid(10, 15)
    for roll in (0.4, 0.55, 0.5999):
        Spawner(rng=StubRandom(row=2, roll=roll)).spawn(grid)
        assert grid.get_occupant(2, 14) is Occupant.REWARD


def test_high_roll_spawns_nothing() -> None:
    grid = Grid(10, 15)
    for roll in (0.6, 0.75, 0.99):
        assert Spawner(rng=StubRandom(row=2, roll=roll)).spawn(grid) is None
    assert list(grid.positions_of(Occupant.OBSTACLE)) == []
    assert list(grid.positions_of(Occupant.REWARD)) == []


def test_spawn_overwrites_existing_occupant() -> None:
    grid = Grid(5, 5)
    grid.set_occupant(3, 4, Occupant.REWARD)
    Spawner(rng=StubRandom(row=3, roll=0.0)).spawn(grid)
    assert grid.get_occupant(3, 4) is Occupant.OBSTACLE


def test_only_last_column_is_written() -> None:
    grid = Grid(6, 8)
    spawner = Spawner(rng=random.Random(11))
    for _ in range(200):
        spawner.spawn(grid)
    placed = list(grid.positions_of(Occupant.OBSTACLE)) + list(grid.positions_of(Occupant.REWARD))
    assert placed
    assert all(col == 7 for _, col in placed)


def test_seeded_spawners_are_reproducible() -> None:
    first, second = Grid(10, 15), Grid(10, 15)
    a = Spawner(rng=random.Random(42))
    b = Spawner(rng=random.Random(42))
    assert [a.spawn(first) for _ in range(50)] == [b.spawn(second) for _ in range(50)]


def test_custom_probabilities() -> None:
    spawner = Spawner(obstacle_probability=0.0, reward_probability=1.0, rng=random.Random(3))
    assert {spawner.choose() for _ in range(100)} == {Occupant.REWARD}
