import random

from cavegen.cave.cells import Coord, new_grid
from cavegen.cave.tiles import FLOOR, WALL
from cavegen.cave.tunnels import carve_tunnel_between, draw_circle, get_line
from tests.cave_test_utils import as_coords, border_cells


def test_line_shallow_slope():
    assert get_line(Coord(0, 0), Coord(4, 2)) == as_coords([(0, 0), (1, 1), (2, 1), (3, 2)])


def test_line_vertical_excludes_end():
    assert get_line(Coord(0, 0), Coord(0, 3)) == as_coords([(0, 0), (0, 1), (0, 2)])


def test_line_negative_direction():
    assert get_line(Coord(3, 3), Coord(0, 3)) == as_coords([(3, 3), (2, 3), (1, 3)])


def test_line_same_point_is_empty():
    assert get_line(Coord(2, 2), Coord(2, 2)) == []


def test_line_length_is_dominant_axis():
    line = get_line(Coord(1, 1), Coord(4, 9))
    assert len(line) == 8
    assert line[0] == Coord(1, 1)
    # consecutive points differ by at most one step on each axis
    for a, b in zip(line, line[1:]):
        assert abs(a.x - b.x) <= 1 and abs(a.y - b.y) <= 1


def test_circle_sizes():
    grid = new_grid(5, 5, WALL)
    assert draw_circle(grid, Coord(2, 2), 0) == 1
    grid = new_grid(5, 5, WALL)
    assert draw_circle(grid, Coord(2, 2), 1) == 5
    assert grid[2][3] == FLOOR and grid[3][3] == WALL


def test_circle_never_touches_border():
    grid = new_grid(5, 5, WALL)
    assert draw_circle(grid, Coord(1, 1), 1) == 3
    grid = new_grid(6, 6, WALL)
    draw_circle(grid, Coord(2, 2), 4)
    for x, y in border_cells(grid):
        assert grid[x][y] == WALL


def test_tunnel_stops_before_target():
    grid = new_grid(10, 5, WALL)
    line = carve_tunnel_between(grid, Coord(1, 2), Coord(6, 2), random.Random(0), (0, 0))
    assert len(line) == 5
    assert all(grid[x][2] == FLOOR for x in range(1, 6))
    assert grid[6][2] == WALL


def test_tunnel_width_is_seeded():
    g1 = new_grid(30, 20, WALL)
    g2 = new_grid(30, 20, WALL)
    carve_tunnel_between(g1, Coord(3, 3), Coord(25, 15), random.Random(5), (0, 4))
    carve_tunnel_between(g2, Coord(3, 3), Coord(25, 15), random.Random(5), (0, 4))
    assert g1 == g2
