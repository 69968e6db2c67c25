from dataclasses import dataclass, field
from typing import List

from .cells import Coord, Grid, Region, grid_size
from .tiles import WALL


@dataclass
class Room:
    index: int
    tiles: List[Coord]
    edge_tiles: List[Coord]
    connected_rooms: List[int] = field(default_factory=list)
    is_main_room: bool = False
    is_accessible_from_main: bool = False

    @property
    def size(self) -> int:
        return len(self.tiles)

    def is_connected(self, other_index: int) -> bool:
        return other_index in self.connected_rooms

    def to_dict(self):
        return {
            "index": self.index,
            "size": self.size,
            "edge_tiles": len(self.edge_tiles),
            "is_main_room": self.is_main_room,
            "is_accessible_from_main": self.is_accessible_from_main,
            "connected_rooms": list(self.connected_rooms),
        }


def find_edge_tiles(grid: Grid, tiles: Region) -> List[Coord]:
    """Tiles with at least one orthogonal wall neighbour, each listed once."""
    width, height = grid_size(grid)
    edges: List[Coord] = []
    for tile in tiles:
        for nx, ny in ((tile.x - 1, tile.y), (tile.x, tile.y - 1), (tile.x, tile.y + 1), (tile.x + 1, tile.y)):
            if 0 <= nx < width and 0 <= ny < height and grid[nx][ny] == WALL:
                edges.append(tile)
                break
    return edges


def build_rooms(grid: Grid, regions: List[Region]) -> List[Room]:
    """Promote surviving floor regions to rooms.

    Rooms are ordered largest first (stable for equal sizes) and indexed by
    that order; room 0 becomes the main room and the accessibility root.
    """
    ordered = sorted(regions, key=len, reverse=True)
    rooms = [Room(index=i, tiles=list(region), edge_tiles=find_edge_tiles(grid, region)) for i, region in enumerate(ordered)]
    if rooms:
        rooms[0].is_main_room = True
        rooms[0].is_accessible_from_main = True
    return rooms


__all__ = ["Room", "find_edge_tiles", "build_rooms"]
