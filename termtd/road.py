"""Random generation of the winding road across the map."""

from __future__ import annotations

import logging
import random
from typing import List, Tuple

LAND = "#"
ROAD = " "
CURVE_UP = "/"
CURVE_DOWN = "\\"
VALLEY = "V"
PEAK = "Λ"

# The larger this is, the less often the road changes direction.
_SHIFT_RANGE = 7
_EDGE_MARGIN = 6

log = logging.getLogger(__name__)

Grid = List[List[str]]
Point = Tuple[int, int]


def generate_road(rng: random.Random, width: int, height: int) -> Tuple[Grid, List[Point]]:
    """Build a land grid crossed left to right by a road.

    Returns the grid as rows of characters and the road points as
    ``(row, column)`` pairs for every column after the first.
    """
    grid: Grid = [[LAND] * width for _ in range(height)]

    y = rng.randrange(height)
    grid[y][0] = ROAD
    log.debug("Start height (y) :: %d", y)

    points: List[Point] = []
    prev_curve = ""

    for x in range(1, width):
        curve = ""
        shift = rng.randrange(_SHIFT_RANGE)
        if shift == 0 and y > _EDGE_MARGIN:
            y -= 1
            grid[y][x - 1] = CURVE_UP
            grid[y + 1][x] = CURVE_UP
            curve = CURVE_UP
        elif shift == 1 and y < height - _EDGE_MARGIN:
            y += 1
            grid[y - 1][x] = CURVE_DOWN
            grid[y][x - 1] = CURVE_DOWN
            curve = CURVE_DOWN

        if prev_curve == CURVE_DOWN and curve == CURVE_UP:
            grid[y][x - 1] = VALLEY
        if prev_curve == CURVE_UP and curve == CURVE_DOWN:
            grid[y][x - 1] = PEAK

        grid[y][x] = ROAD
        points.append((y, x))
        prev_curve = curve

    return grid, points