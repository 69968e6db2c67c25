"""Auxiliary tooling outputs: passage line segments, an ASCII grid overlay and
structural checks.

None of these are needed for a correct cave; they exist for visual inspection
in the CLI and the map endpoint, and for the seed diagnostics script.
"""
from __future__ import annotations

from typing import List, Tuple

from .cells import Coord, Grid, grid_size
from .connectivity import RoomGraph
from .noise import is_border
from .regions import find_regions
from .tiles import FLOOR, TILE_CHARS, WALL

Vec3 = Tuple[float, float, float]


def coord_to_world_point(tile: Coord, width: int, height: int, square_size: float = 1.0) -> Vec3:
    """Centre of ``tile`` in the same x/z space the mesh uses."""
    return (
        (-width / 2 + 0.5 + tile.x) * square_size,
        0.0,
        (-height / 2 + 0.5 + tile.y) * square_size,
    )


def connection_segments(cave) -> List[Tuple[Vec3, Vec3]]:
    width, height = cave.config.width, cave.config.height
    size = cave.config.square_size
    return [
        (coord_to_world_point(p.tile_a, width, height, size), coord_to_world_point(p.tile_b, width, height, size))
        for p in cave.passages
    ]


def render_ascii(grid: Grid) -> List[str]:
    """One string per row, highest y first so the output reads like the mesh from above."""
    width, height = grid_size(grid)
    return ["".join(TILE_CHARS[grid[x][y]] for x in range(width)) for y in range(height - 1, -1, -1)]


def analyze(cave) -> dict:
    """Structural checks over a finished cave.

    Returns lists/counts a diagnostic script can turn into pass/fail:
      * unreachable_rooms: indices of rooms not flagged accessible
      * graph_connected: room connection graph is a single component
      * border_breaches: border cells that are not walls
      * floor_regions: number of 4-connected floor regions in the final grid
      * bad_triangle_indices: triangle indices outside the vertex list
    """
    width, height = grid_size(cave.grid)
    vertex_count = cave.mesh.vertex_count
    return {
        "unreachable_rooms": [r.index for r in cave.rooms if not r.is_accessible_from_main],
        "graph_connected": RoomGraph(cave.rooms).is_single_component(),
        "border_breaches": [
            (x, y) for x in range(width) for y in range(height) if is_border(x, y, width, height) and cave.grid[x][y] != WALL
        ],
        "floor_regions": len(find_regions(cave.grid, FLOOR)),
        "bad_triangle_indices": sum(1 for i in cave.mesh.triangles if not 0 <= i < vertex_count),
    }


__all__ = ["coord_to_world_point", "connection_segments", "render_ascii", "analyze"]
