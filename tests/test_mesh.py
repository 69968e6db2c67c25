import pytest

from cavegen.cave import Cave, CaveConfig
from cavegen.cave.cells import new_grid
from cavegen.cave.mesh import TRIANGULATION_TABLE, SquareGrid, triangulate
from cavegen.cave.tiles import FLOOR, WALL
from tests.cave_test_utils import OPEN_PARAMS

CORNER_BITS = {"top_left": 8, "top_right": 4, "bottom_right": 2, "bottom_left": 1}


def test_solid_two_by_two_is_one_quad():
    mesh = triangulate(new_grid(2, 2, WALL))
    assert mesh.vertices == [(-0.5, 0.0, 0.5), (0.5, 0.0, 0.5), (0.5, 0.0, -0.5), (-0.5, 0.0, -0.5)]
    assert mesh.triangles == [0, 1, 2, 0, 2, 3]
    assert list(mesh.faces()) == [(0, 1, 2), (0, 2, 3)]


def test_open_grid_has_empty_mesh():
    mesh = triangulate(new_grid(6, 4, FLOOR))
    assert mesh.vertices == [] and mesh.triangles == []


def test_single_corner_wall():
    grid = new_grid(2, 2, FLOOR)
    grid[0][0] = WALL
    mesh = triangulate(grid)
    # center_bottom, bottom_left, center_left
    assert mesh.vertices == [(0.0, 0.0, -0.5), (-0.5, 0.0, -0.5), (-0.5, 0.0, 0.0)]
    assert mesh.triangles == [0, 1, 2]


def test_shared_nodes_are_not_duplicated():
    mesh = triangulate(new_grid(3, 3, WALL))
    assert mesh.vertex_count == 9
    assert mesh.triangle_count == 8


def test_isolated_wall_cell():
    grid = new_grid(3, 3, FLOOR)
    grid[1][1] = WALL
    mesh = triangulate(grid)
    assert mesh.vertex_count == 5
    assert mesh.triangle_count == 4


def test_square_size_scales_positions():
    mesh = triangulate(new_grid(2, 2, WALL), square_size=2.0)
    assert mesh.vertices[0] == (-1.0, 0.0, 1.0)


def test_square_configuration_bits():
    grid = new_grid(2, 2, FLOOR)
    grid[0][1] = WALL  # top-left of the only square
    grid[1][0] = WALL  # bottom-right
    square = SquareGrid(grid).squares[0][0]
    assert square.configuration == 10


@pytest.mark.parametrize("configuration", range(16))
def test_table_corners_match_configuration(configuration):
    outline = TRIANGULATION_TABLE[configuration]
    active = {name for name, bit in CORNER_BITS.items() if configuration & bit}
    assert {name for name in outline if name in CORNER_BITS} == active
    assert len(outline) == 0 or len(outline) >= 3


def test_generated_mesh_is_consistent():
    cave = Cave(CaveConfig(seed="mesh-check", **OPEN_PARAMS))
    mesh = cave.mesh
    assert len(mesh.triangles) % 3 == 0
    assert all(0 <= i < mesh.vertex_count for i in mesh.triangles)
    assert len(set(mesh.vertices)) == mesh.vertex_count
    # every vertex is used by at least one triangle
    assert set(mesh.triangles) == set(range(mesh.vertex_count))
    assert mesh.triangle_count == cave.metrics["triangles"]
