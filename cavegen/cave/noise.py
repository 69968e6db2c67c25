"""Noise field: seeded random fill of the initial wall/floor grid."""
from __future__ import annotations

import random

from .cells import Grid, new_grid
from .tiles import FLOOR, WALL


def is_border(x: int, y: int, width: int, height: int) -> bool:
    return x == 0 or x == width - 1 or y == 0 or y == height - 1


def fill_noise(width: int, height: int, fill_percentage: float, rng: random.Random) -> Grid:
    """Return a new grid with a solid wall border and a random interior.

    Interior cells are visited x outer / y inner and become WALL when
    ``rng.randrange(100) < fill_percentage``. Border cells never consume a draw,
    so the random stream depends only on the interior size.
    """
    grid = new_grid(width, height, FLOOR)
    for x in range(width):
        for y in range(height):
            if is_border(x, y, width, height):
                grid[x][y] = WALL
            else:
                grid[x][y] = WALL if rng.randrange(100) < fill_percentage else FLOOR
    return grid


__all__ = ["fill_noise", "is_border"]
