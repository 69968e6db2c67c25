import random

from cavegen.cave import Cave, CaveConfig
from cavegen.cave.cells import Coord
from cavegen.cave.debug import analyze, connection_segments, coord_to_world_point, render_ascii
from cavegen.cave.mesh import SquareGrid
from tests.cave_test_utils import OPEN_PARAMS, boxed_grid, grid_from_rows


def test_render_ascii_round_trips_rows():
    rows = [
        "#####",
        "#..##",
        "#.#.#",
        "#####",
    ]
    assert render_ascii(grid_from_rows(rows)) == rows


def test_world_point_matches_control_nodes():
    grid = boxed_grid(6, 4, [(1, 1, 4, 2)])
    for size in (1.0, 2.0):
        nodes = SquareGrid(grid, size).control_nodes
        for x, y in ((0, 0), (3, 2), (5, 3)):
            assert coord_to_world_point(Coord(x, y), 6, 4, size) == nodes[x][y].position


def test_segments_follow_passages():
    cave = Cave(CaveConfig(seed="segments", **OPEN_PARAMS))
    segments = connection_segments(cave)
    assert len(segments) == len(cave.passages)
    for (a, b), p in zip(segments, cave.passages):
        assert a == coord_to_world_point(p.tile_a, cave.width, cave.height)
        assert b == coord_to_world_point(p.tile_b, cave.width, cave.height)


def test_analyze_clean_cave():
    cave = Cave(CaveConfig(seed=random.Random(4).randrange(10_000), **OPEN_PARAMS))
    res = analyze(cave)
    assert res["unreachable_rooms"] == []
    assert res["graph_connected"] is True
    assert res["border_breaches"] == []
    assert res["bad_triangle_indices"] == 0
    assert res["floor_regions"] >= 1
