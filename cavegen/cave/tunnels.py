"""Corridor rasterization and carving.

Corridors follow an integer line between two edge tiles; every point on the
line stamps a floor disc whose radius is drawn per point, giving passages of
uneven width.
"""
from __future__ import annotations

import random
from typing import List, Tuple

from .cells import Coord, Grid, grid_size
from .tiles import FLOOR


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def get_line(start: Coord, end: Coord) -> List[Coord]:
    """Bresenham-style line from ``start`` toward ``end``.

    Steps along the dominant axis; the minor axis advances whenever the
    accumulator (seeded at half the major length) reaches the major length.
    Yields ``longest`` points beginning at ``start``; ``end`` itself is not
    included.
    """
    x, y = start
    dx = end.x - start.x
    dy = end.y - start.y

    inverted = False
    step = _sign(dx)
    gradient_step = _sign(dy)
    longest = abs(dx)
    shortest = abs(dy)

    if longest < shortest:
        inverted = True
        longest, shortest = shortest, longest
        step, gradient_step = gradient_step, step

    line: List[Coord] = []
    gradient_accumulation = longest // 2
    for _ in range(longest):
        line.append(Coord(x, y))
        if inverted:
            y += step
        else:
            x += step
        gradient_accumulation += shortest
        if gradient_accumulation >= longest:
            if inverted:
                x += gradient_step
            else:
                y += gradient_step
            gradient_accumulation -= longest
    return line


def draw_circle(grid: Grid, center: Coord, radius: int) -> int:
    """Stamp a filled floor disc clipped to the grid interior. Returns cells written.

    Border cells are never written so the wall frame survives carving.
    """
    width, height = grid_size(grid)
    written = 0
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx * dx + dy * dy <= radius * radius:
                px, py = center.x + dx, center.y + dy
                if 0 < px < width - 1 and 0 < py < height - 1:
                    grid[px][py] = FLOOR
                    written += 1
    return written


def carve_tunnel_between(grid: Grid, a: Coord, b: Coord, rng: random.Random, radius_range: Tuple[int, int]) -> List[Coord]:
    """Carve a variable-width corridor from ``a`` toward ``b``; returns the line walked."""
    lo, hi = radius_range
    line = get_line(a, b)
    for point in line:
        draw_circle(grid, point, rng.randint(lo, hi))
    return line


__all__ = ["get_line", "draw_circle", "carve_tunnel_between"]
