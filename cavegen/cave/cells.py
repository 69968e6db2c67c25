from typing import List, NamedTuple

from .tiles import WALL


class Coord(NamedTuple):
    """Integer grid cell position."""
    x: int
    y: int


Grid = List[List[str]]  # column-major: grid[x][y]
Region = List[Coord]


def new_grid(width: int, height: int, fill: str = WALL) -> Grid:
    return [[fill for _ in range(height)] for _ in range(width)]


def grid_size(grid: Grid):
    """Return (width, height) of a column-major grid."""
    width = len(grid)
    return width, (len(grid[0]) if width else 0)


def copy_grid(grid: Grid) -> Grid:
    return [list(col) for col in grid]


def count_tiles(grid: Grid, tile_type: str) -> int:
    return sum(1 for col in grid for t in col if t == tile_type)
