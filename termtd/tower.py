"""Towers: where they may stand, how they are drawn and when they fire."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence, Tuple

from termtd.canvas import Canvas, Style

LIGHT_SKY_BLUE = "lightskyblue"
DEFAULT_LOS = 4
ATTACK_DAMAGE = 1

log = logging.getLogger(__name__)

Location = Tuple[int, int]


def euclidean_distance(px: float, py: float, qx: float, qy: float) -> int:
    """Distance between two points, truncated to an integer."""
    return int(math.sqrt((qx - px) ** 2 + (qy - py) ** 2))


@dataclass
class Tower:
    """A built tower at column ``w``, row ``h``.

    ``attack_speed`` is the cooldown in seconds between attacks.
    """

    w: int
    h: int
    los: int = DEFAULT_LOS
    attack_speed: float = 0.0
    last_attack: Optional[float] = None
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def unit_close_to_tower(self, px: float, py: float, qx: float, qy: float) -> bool:
        """Whether point p lies within line of sight of point q."""
        return euclidean_distance(px, py, qx, qy) <= self.los

    def attack(self) -> int:
        """Fire, record the time and return the damage dealt."""
        self.last_attack = self.clock()
        log.debug("Attack at %s", self.last_attack)
        return ATTACK_DAMAGE

    def can_attack_now(self) -> bool:
        """Whether the cooldown since the last attack has passed."""
        if self.last_attack is None:
            return True
        return self.clock() - self.last_attack > self.attack_speed


def generate_tower_placeholder(tower_location: Iterable[Location], screen: Canvas) -> None:
    """Clear a 3x3 block around each ``(row, column)`` location."""
    for row, col in tower_location:
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                screen.set_content(col + dx, row + dy, " ", Style())


def allowed_to_place_tower(
    x: int, y: int, tower_location: Sequence[Location]
) -> Optional[Location]:
    """Return the build spot whose pad covers column ``x``, row ``y``, if any."""
    for location in tower_location:
        row, col = location
        if y == row and col - 1 <= x <= col + 1:
            return location
    return None


def check_for_screen_before_place_tower(x: int, y: int, screen: Canvas) -> bool:
    """Whether the three cells centred on ``(x, y)`` are still free."""
    return all(screen.get_content(x + dx, y).ch == " " for dx in (-1, 0, 1))


def place_a_tower(screen: Canvas, x: int, y: int, attack_speed: float) -> Tower:
    """Draw a tower centred on ``(x, y)`` and return it."""
    style = Style(foreground=LIGHT_SKY_BLUE)
    screen.set_content(x - 1, y, "|", style)
    screen.set_content(x, y, "*", style)
    screen.set_content(x + 1, y, "|", style)
    return Tower(w=x, h=y, los=DEFAULT_LOS, attack_speed=attack_speed)