"""Room connectivity: guarantee every room is reachable from the main room.

Two phases, both deterministic for a given room order and RNG state:

  1. Nearest neighbour: each room without connections (checked at the moment it
     is visited) is joined to the room owning the closest edge tile, and the
     corridor is carved immediately.
  2. Reachability: while any room is unreachable from the main room, the single
     closest edge-tile pair between an unreachable and a reachable room is
     carved. One corridor per iteration; the reachable set is recomputed each
     time by walking the connection graph.
"""
from __future__ import annotations

import random
from collections import deque
from typing import Deque, Iterable, List, NamedTuple, Optional, Set, Tuple

from ..logging_utils import get_logger
from .cells import Coord, Grid
from .errors import CaveGenerationError
from .rooms import Room
from .tunnels import carve_tunnel_between

log = get_logger("cavegen.connectivity")


class Passage(NamedTuple):
    room_a: int
    room_b: int
    tile_a: Coord
    tile_b: Coord


class _Candidate(NamedTuple):
    distance: int
    room_a: int
    room_b: int
    tile_a: Coord
    tile_b: Coord


class RoomGraph:
    """Index-based undirected graph over a single owned list of rooms."""

    def __init__(self, rooms: List[Room]):
        self.rooms = rooms

    @property
    def main_index(self) -> int:
        for room in self.rooms:
            if room.is_main_room:
                return room.index
        raise CaveGenerationError("room graph has no main room")

    def is_connected(self, a: int, b: int) -> bool:
        return self.rooms[a].is_connected(b)

    def set_accessible_from_main(self, start: int) -> None:
        """Mark ``start`` and everything connected to it as accessible."""
        q: Deque[int] = deque([start])
        while q:
            idx = q.popleft()
            room = self.rooms[idx]
            if room.is_accessible_from_main:
                continue
            room.is_accessible_from_main = True
            q.extend(n for n in room.connected_rooms if not self.rooms[n].is_accessible_from_main)

    def connect(self, a: int, b: int) -> None:
        room_a, room_b = self.rooms[a], self.rooms[b]
        if room_a.is_accessible_from_main:
            self.set_accessible_from_main(b)
        elif room_b.is_accessible_from_main:
            self.set_accessible_from_main(a)
        room_a.connected_rooms.append(b)
        room_b.connected_rooms.append(a)

    def component_of(self, start: int) -> Set[int]:
        seen = {start}
        q: Deque[int] = deque([start])
        while q:
            idx = q.popleft()
            for n in self.rooms[idx].connected_rooms:
                if n not in seen:
                    seen.add(n)
                    q.append(n)
        return seen

    def reachable_from_main(self) -> Set[int]:
        return self.component_of(self.main_index)

    def is_single_component(self) -> bool:
        return not self.rooms or len(self.reachable_from_main()) == len(self.rooms)


def _closest_pair(
    rooms_a: Iterable[Room], rooms_b: List[Room], graph: RoomGraph, best: Optional[_Candidate] = None
) -> Optional[_Candidate]:
    """Scan edge-tile pairs; strict ``<`` so the first pair found wins ties."""
    for room_a in rooms_a:
        for room_b in rooms_b:
            if room_a.index == room_b.index or graph.is_connected(room_a.index, room_b.index):
                continue
            for tile_a in room_a.edge_tiles:
                for tile_b in room_b.edge_tiles:
                    distance = (tile_a.x - tile_b.x) ** 2 + (tile_a.y - tile_b.y) ** 2
                    if best is None or distance < best.distance:
                        best = _Candidate(distance, room_a.index, room_b.index, tile_a, tile_b)
    return best


def create_passage(
    grid: Grid, graph: RoomGraph, candidate: _Candidate, rng: random.Random, radius_range: Tuple[int, int]
) -> Passage:
    graph.connect(candidate.room_a, candidate.room_b)
    carve_tunnel_between(grid, candidate.tile_a, candidate.tile_b, rng, radius_range)
    log.debug(
        event="passage_carved",
        room_a=candidate.room_a,
        room_b=candidate.room_b,
        tile_a=f"{candidate.tile_a.x},{candidate.tile_a.y}",
        tile_b=f"{candidate.tile_b.x},{candidate.tile_b.y}",
        distance_sq=candidate.distance,
    )
    return Passage(candidate.room_a, candidate.room_b, candidate.tile_a, candidate.tile_b)


def connect_closest_rooms(grid: Grid, graph: RoomGraph, rng: random.Random, radius_range: Tuple[int, int]) -> List[Passage]:
    passages: List[Passage] = []
    for room_a in graph.rooms:
        if room_a.connected_rooms:
            continue
        best = _closest_pair([room_a], graph.rooms, graph)
        if best is not None:
            passages.append(create_passage(grid, graph, best, rng, radius_range))
    return passages


def ensure_main_room_access(grid: Grid, graph: RoomGraph, rng: random.Random, radius_range: Tuple[int, int]) -> List[Passage]:
    passages: List[Passage] = []
    while True:
        reachable_ids = graph.reachable_from_main()
        for idx in reachable_ids:
            graph.rooms[idx].is_accessible_from_main = True
        reachable = [r for r in graph.rooms if r.index in reachable_ids]
        not_reachable = [r for r in graph.rooms if r.index not in reachable_ids]
        if not not_reachable:
            return passages
        best = _closest_pair(not_reachable, reachable, graph)
        if best is None:
            raise CaveGenerationError(f"no corridor candidate for {len(not_reachable)} unreachable rooms")
        passages.append(create_passage(grid, graph, best, rng, radius_range))


def connect_rooms(grid: Grid, rooms: List[Room], rng: random.Random, radius_range: Tuple[int, int] = (0, 4)) -> List[Passage]:
    """Connect all rooms into one component, carving corridors into ``grid``.

    Returns the carved passages in order.
    """
    if not rooms:
        return []
    graph = RoomGraph(rooms)
    passages = connect_closest_rooms(grid, graph, rng, radius_range)
    passages.extend(ensure_main_room_access(grid, graph, rng, radius_range))
    return passages


__all__ = [
    "Passage",
    "RoomGraph",
    "create_passage",
    "connect_closest_rooms",
    "ensure_main_room_access",
    "connect_rooms",
]
