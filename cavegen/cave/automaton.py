"""Cellular automaton smoothing.

Each pass reads a snapshot of the previous state so updates never leak into
neighbor counts within the same pass.
"""
from __future__ import annotations

from .cells import Grid, copy_grid, grid_size
from .noise import is_border
from .tiles import FLOOR, WALL


def get_neighbour_wall_count(grid: Grid, grid_x: int, grid_y: int) -> int:
    """Count walls in the 8-neighbourhood; cells outside the grid count as walls."""
    width, height = grid_size(grid)
    count = 0
    for nx in range(grid_x - 1, grid_x + 2):
        for ny in range(grid_y - 1, grid_y + 2):
            if nx == grid_x and ny == grid_y:
                continue
            if 0 <= nx < width and 0 <= ny < height:
                if grid[nx][ny] == WALL:
                    count += 1
            else:
                count += 1
    return count


def smooth_pass(grid: Grid) -> None:
    width, height = grid_size(grid)
    snapshot = copy_grid(grid)
    for x in range(width):
        for y in range(height):
            if is_border(x, y, width, height):
                grid[x][y] = WALL
                continue
            walls = get_neighbour_wall_count(snapshot, x, y)
            if walls > 4:
                grid[x][y] = WALL
            elif walls < 4:
                grid[x][y] = FLOOR


def smooth(grid: Grid, iterations: int) -> Grid:
    """Run ``iterations`` smoothing passes in place and return the grid."""
    for _ in range(iterations):
        smooth_pass(grid)
    return grid


__all__ = ["get_neighbour_wall_count", "smooth_pass", "smooth"]
