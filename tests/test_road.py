import random

import pytest

from termtd.road import LAND, ROAD, generate_road

WIDTH = 100
HEIGHT = 24
SEEDS = [1748163368027334600, 0, 1, 42, 7, 123456789, 2**40 + 3]


@pytest.mark.parametrize("seed", SEEDS)
def test_road_points_are_road_cells(seed):
    grid, points = generate_road(random.Random(seed), WIDTH, HEIGHT)
    for y, x in points:
        assert 0 <= y < HEIGHT
        assert 0 <= x < WIDTH
        assert grid[y][x] == ROAD


@pytest.mark.parametrize("seed", SEEDS)
def test_road_has_one_point_per_column_after_first(seed):
    _, points = generate_road(random.Random(seed), WIDTH, HEIGHT)
    assert [x for _, x in points] == list(range(1, WIDTH))


@pytest.mark.parametrize("seed", SEEDS)
def test_road_moves_at_most_one_row_per_column(seed):
    _, points = generate_road(random.Random(seed), WIDTH, HEIGHT)
    rows = [y for y, _ in points]
    assert all(abs(a - b) <= 1 for a, b in zip(rows, rows[1:]))


@pytest.mark.parametrize("seed", SEEDS)
def test_grid_dimensions_and_alphabet(seed):
    grid, _ = generate_road(random.Random(seed), WIDTH, HEIGHT)
    assert len(grid) == HEIGHT
    assert all(len(row) == WIDTH for row in grid)
    allowed = {LAND, ROAD, "/", "\\", "V", "Λ"}
    assert {ch for row in grid for ch in row} <= allowed


def test_first_column_holds_exactly_one_road_start():
    grid, _ = generate_road(random.Random(5), WIDTH, HEIGHT)
    assert [row[0] for row in grid].count(ROAD) >= 1


def test_same_seed_gives_same_road():
    first = generate_road(random.Random(99), WIDTH, HEIGHT)
    second = generate_road(random.Random(99), WIDTH, HEIGHT)
    assert first == second


def test_zero_height_rejected():
    with pytest.raises(ValueError):
        generate_road(random.Random(1), WIDTH, 0)