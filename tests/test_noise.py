import random

from cavegen.cave.noise import fill_noise, is_border
from cavegen.cave.tiles import FLOOR, WALL
from tests.cave_test_utils import border_cells


def test_full_fill_is_all_walls():
    grid = fill_noise(12, 9, 100, random.Random(1))
    assert all(t == WALL for col in grid for t in col)


def test_zero_fill_leaves_open_interior():
    w, h = 12, 9
    grid = fill_noise(w, h, 0, random.Random(1))
    for x in range(w):
        for y in range(h):
            expected = WALL if is_border(x, y, w, h) else FLOOR
            assert grid[x][y] == expected, (x, y)


def test_border_always_wall():
    grid = fill_noise(30, 20, 10, random.Random(7))
    for x, y in border_cells(grid):
        assert grid[x][y] == WALL


def test_same_seed_same_noise():
    g1 = fill_noise(40, 30, 47, random.Random(99))
    g2 = fill_noise(40, 30, 47, random.Random(99))
    assert g1 == g2


def test_grid_is_column_major():
    grid = fill_noise(7, 3, 50, random.Random(0))
    assert len(grid) == 7
    assert all(len(col) == 3 for col in grid)


def test_border_consumes_no_draws():
    # 5x4 grid has a 3x2 interior: exactly six draws from the stream
    rng = random.Random(2024)
    fill_noise(5, 4, 47, rng)
    reference = random.Random(2024)
    for _ in range(6):
        reference.randrange(100)
    assert rng.getstate() == reference.getstate()
