import random

import pytest

from termtd.canvas import Canvas, Style
from termtd.placement import ANTIQUE_WHITE, tower_placement


def _land_with_single_road_cell(x, y, size=20):
    canvas = Canvas(size, size)
    for cx, cy, _ in list(canvas.cells()):
        canvas.set_content(cx, cy, "#")
    canvas.set_content(x, y, " ")
    return canvas


def test_placement_is_three_rows_from_road():
    canvas = _land_with_single_road_cell(5, 10)
    spots = tower_placement(20, 20, 1, canvas, random.Random(3))
    assert len(spots) == 1
    assert spots[0] in {(7, 5), (13, 5)}


def test_placement_draws_pad():
    canvas = _land_with_single_road_cell(5, 10)
    [(row, col)] = tower_placement(20, 20, 1, canvas, random.Random(8))
    assert [canvas.get_content(c, row).ch for c in (col - 1, col, col + 1)] == [" "] * 3
    assert canvas.get_content(col, row).style == Style(background=ANTIQUE_WHITE)
    assert canvas.get_content(col - 1, row).style == Style()


@pytest.mark.parametrize("seed", range(10))
def test_number_of_placements_matches_request(seed):
    canvas = _land_with_single_road_cell(5, 10)
    spots = tower_placement(20, 20, 7, canvas, random.Random(seed))
    assert len(spots) == 7
    assert all(spot in {(7, 5), (13, 5)} for spot in spots)


def test_zero_towers_needs_no_road():
    canvas = Canvas(5, 5)
    for x, y, _ in list(canvas.cells()):
        canvas.set_content(x, y, "#")
    assert tower_placement(5, 5, 0, canvas, random.Random(1)) == []


def test_no_road_raises():
    canvas = Canvas(5, 5)
    for x, y, _ in list(canvas.cells()):
        canvas.set_content(x, y, "#")
    with pytest.raises(ValueError):
        tower_placement(5, 5, 1, canvas, random.Random(1))