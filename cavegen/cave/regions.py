"""Region analysis and size-based pruning.

Regions are maximal 4-connected groups of same-type cells. Pruning erases
undersized wall islands (they become floor) and undersized open pockets (they
become wall); the open regions that survive are promoted to rooms.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, List, Tuple

from .cells import Coord, Grid, Region, grid_size
from .tiles import FLOOR, WALL


def get_region_tiles(grid: Grid, start_x: int, start_y: int, flags=None) -> Region:
    """Breadth-first flood fill from (start_x, start_y) over cells of the same type.

    Only orthogonal neighbours join the region. ``flags`` (optional column-major
    bool grid) is marked for every tile added so callers can share it.
    """
    width, height = grid_size(grid)
    if flags is None:
        flags = [[False] * height for _ in range(width)]
    tile_type = grid[start_x][start_y]
    tiles: Region = []
    q: Deque[Coord] = deque([Coord(start_x, start_y)])
    flags[start_x][start_y] = True
    while q:
        tile = q.popleft()
        tiles.append(tile)
        for nx, ny in ((tile.x - 1, tile.y), (tile.x, tile.y - 1), (tile.x, tile.y + 1), (tile.x + 1, tile.y)):
            if 0 <= nx < width and 0 <= ny < height and not flags[nx][ny] and grid[nx][ny] == tile_type:
                flags[nx][ny] = True
                q.append(Coord(nx, ny))
    return tiles


def find_regions(grid: Grid, tile_type: str) -> List[Region]:
    """Return every region of ``tile_type`` in x-outer / y-inner discovery order."""
    width, height = grid_size(grid)
    flags = [[False] * height for _ in range(width)]
    regions: List[Region] = []
    for x in range(width):
        for y in range(height):
            if not flags[x][y] and grid[x][y] == tile_type:
                regions.append(get_region_tiles(grid, x, y, flags))
    return regions


def _fill(grid: Grid, region: Region, tile_type: str) -> None:
    for tile in region:
        grid[tile.x][tile.y] = tile_type


def _touches_border(region: Region, width: int, height: int) -> bool:
    return any(t.x in (0, width - 1) or t.y in (0, height - 1) for t in region)


def prune_wall_regions(grid: Grid, wall_size_minimum: int) -> int:
    """Convert wall regions smaller than the minimum to floor. Returns regions removed.

    The region holding the border frame is never removed, however small.
    """
    width, height = grid_size(grid)
    removed = 0
    for region in find_regions(grid, WALL):
        if len(region) < wall_size_minimum and not _touches_border(region, width, height):
            _fill(grid, region, FLOOR)
            removed += 1
    return removed


def prune_room_regions(grid: Grid, room_size_minimum: int) -> Tuple[List[Region], int]:
    """Fill floor regions smaller than the minimum with wall.

    Returns (surviving_regions, regions_removed); survivors keep discovery order.
    """
    survivors: List[Region] = []
    removed = 0
    for region in find_regions(grid, FLOOR):
        if len(region) < room_size_minimum:
            _fill(grid, region, WALL)
            removed += 1
        else:
            survivors.append(region)
    return survivors, removed


def prune_regions(grid: Grid, wall_size_minimum: int, room_size_minimum: int) -> List[Region]:
    """Run both pruning passes (walls first) and return the surviving open regions."""
    prune_wall_regions(grid, wall_size_minimum)
    survivors, _ = prune_room_regions(grid, room_size_minimum)
    return survivors


__all__ = ["get_region_tiles", "find_regions", "prune_wall_regions", "prune_room_regions", "prune_regions"]
