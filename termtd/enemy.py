"""Enemies that walk the road and flash when hit."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from termtd.canvas import Canvas, Color, Style

GRUNT = "○"
BLUE = (0, 0, 255)
FLASH_COLOR = "red"
DEAD = " "

log = logging.getLogger(__name__)

# (column offset from the start, hit points, interval multiplier, delay multiplier)
_WAVE = (
    (0, 2, 4, 0),
    (-2, 3, 5, 5),
    (-2, 3, 6, 15),
)


@dataclass
class Enemy:
    """An enemy at column ``w``, row ``h``.

    ``interval`` is the time in seconds between steps along the road and
    ``flash_tick`` how long it is drawn in the flash colour after a hit.
    """

    h: int
    w: int
    hp: int
    interval: float
    last_moved: float
    flash_tick: float
    kind: str = GRUNT
    color: Color = BLUE
    last_hit: Optional[float] = None
    road_state: int = 0
    alive: bool = True
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` hit points; die when none are left."""
        self.hp -= amount
        self.last_hit = self.clock()
        log.debug("Hit at %s", self.last_hit)
        if self.hp <= 0:
            self.alive = False

    def must_flash(self) -> bool:
        """Whether the enemy was hit recently enough to be drawn flashing."""
        if self.last_hit is None:
            return False
        return self.clock() - self.last_hit < self.flash_tick

    def draw(self, screen: Canvas) -> None:
        """Draw the enemy at its position, blank if it is dead."""
        color: Color = FLASH_COLOR if self.must_flash() else self.color
        ch = self.kind if self.alive else DEAD
        screen.set_content(self.w, self.h, ch, Style(foreground=color))


def generate_enemies(
    base_interval: float,
    height: int,
    flash_tick: float,
    h_start: int,
    w_start: int,
) -> List[Enemy]:
    """Create the wave of grunts that starts at row ``h_start``, column ``w_start``.

    Later grunts are slower and set off after a delay. ``height`` is the map
    height; the wave does not depend on it. Times come from ``time.monotonic``.
    """
    now = time.monotonic()
    return [
        Enemy(
            h=h_start,
            w=w_start + offset,
            hp=hp,
            interval=base_interval * speed,
            last_moved=now + base_interval * delay,
            flash_tick=flash_tick,
        )
        for offset, hp, speed, delay in _WAVE
    ]