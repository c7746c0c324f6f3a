# pellet_duel/pellets.py - Per-cell pellet and power pellet state
import random
from typing import NamedTuple

from .config import PELLET_SCORE, POWER_PELLET_SCORE, SCATTER_RADIUS
from .grid import GRID_COLS, GRID_ROWS, cell_key, floor_cells, is_wall, power_spots


class Pickup(NamedTuple):
    score_delta: int
    power_granted: bool


NO_PICKUP = Pickup(0, False)


class PelletField:
    """Dense pellet grids indexed as [y][x].

    A cell holds a normal pellet, a power pellet, or nothing; never both.
    Wall cells always hold nothing.
    """

    def __init__(self):
        self.pellets = [[False] * GRID_COLS for _ in range(GRID_ROWS)]
        self.power = [[False] * GRID_COLS for _ in range(GRID_ROWS)]

    @classmethod
    def initialize(cls):
        """Fresh field: a pellet on every floor cell, power pellets at the four spots."""
        field = cls()
        for x, y in floor_cells():
            field.pellets[y][x] = True
        for x, y in power_spots():
            if is_wall(x, y):
                continue
            field.pellets[y][x] = False
            field.power[y][x] = True
        return field

    def has_pellet(self, x, y):
        return not is_wall(x, y) and self.pellets[y][x]

    def has_power(self, x, y):
        return not is_wall(x, y) and self.power[y][x]

    def consume(self, x, y) -> Pickup:
        """Take whatever sits on (x, y)."""
        if is_wall(x, y):
            return NO_PICKUP
        if self.pellets[y][x]:
            self.pellets[y][x] = False
            return Pickup(PELLET_SCORE, False)
        if self.power[y][x]:
            self.power[y][x] = False
            return Pickup(POWER_PELLET_SCORE, True)
        return NO_PICKUP

    def scatter(self, cx, cy, count, rng=None):
        """Drop up to `count` pellets on distinct floor cells near (cx, cy).

        Candidates are the non-wall cells within SCATTER_RADIUS (Chebyshev).
        A chosen cell that holds a power pellet keeps it and gets no pellet.
        Returns the cells that were chosen.
        """
        if count <= 0:
            return []
        rng = rng or random
        spots = [
            (cx + dx, cy + dy)
            for dy in range(-SCATTER_RADIUS, SCATTER_RADIUS + 1)
            for dx in range(-SCATTER_RADIUS, SCATTER_RADIUS + 1)
            if not is_wall(cx + dx, cy + dy)
        ]
        if not spots:
            return []
        chosen = rng.sample(spots, min(count, len(spots)))
        for x, y in chosen:
            if not self.power[y][x]:
                self.pellets[y][x] = True
        return chosen

    def remaining(self):
        """Number of pickups still on the field."""
        return sum(row.count(True) for row in self.pellets) + sum(
            row.count(True) for row in self.power
        )

    def to_dict(self):
        """Cell-keyed maps of both grids, covering every floor cell."""
        return {
            "pellets": {cell_key(x, y): self.pellets[y][x] for x, y in floor_cells()},
            "powerPellets": {cell_key(x, y): self.power[y][x] for x, y in floor_cells()},
        }

    def __eq__(self, other):
        if not isinstance(other, PelletField):
            return NotImplemented
        return self.pellets == other.pellets and self.power == other.power
