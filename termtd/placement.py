"""Choosing spots next to the road where towers may be built."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from termtd.canvas import Canvas, Style
from termtd.road import ROAD

ANTIQUE_WHITE = "antiquewhite"
_PADDING = 3

Location = Tuple[int, int]


def tower_placement(
    width: int,
    height: int,
    max_tower: int,
    screen: Canvas,
    rng: Optional[random.Random] = None,
) -> List[Location]:
    """Mark ``max_tower`` build spots three rows above or below road cells.

    Each spot is drawn as a three-cell pad on ``screen`` and returned as a
    ``(row, column)`` pair for its centre.
    """
    rng = rng if rng is not None else random.Random()

    road_cells = [
        (h, w)
        for h in range(height)
        for w in range(width)
        if screen.get_content(w, h).ch == ROAD
    ]

    placements: List[Location] = []
    for _ in range(max_tower):
        if not road_cells:
            raise ValueError("no road cells to place towers beside")
        row, col = rng.choice(road_cells)
        padding = -_PADDING if rng.randrange(2) == 0 else _PADDING
        target = row + padding

        screen.set_content(col, target, " ", Style(background=ANTIQUE_WHITE))
        screen.set_content(col - 1, target, " ", Style())
        screen.set_content(col + 1, target, " ", Style())

        placements.append((target, col))

    return placements