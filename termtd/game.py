"""The game loop: a road, build spots, a wave of enemies and the towers."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Dict, List, Optional

from termtd.canvas import Canvas
from termtd.enemy import Enemy, generate_enemies
from termtd.placement import tower_placement
from termtd.road import generate_road
from termtd.tower import (
    Tower,
    allowed_to_place_tower,
    check_for_screen_before_place_tower,
    place_a_tower,
)

WIDTH = 180
HEIGHT = 25
TICK = 0.1
MAX_TOWERS = 7

log = logging.getLogger(__name__)


class GameOver(Exception):
    """Raised when an enemy walks past the end of the road."""


class Game:
    """State of one game, advanced frame by frame with :meth:`step`."""

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        rng: Optional[random.Random] = None,
        tick: float = TICK,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.tick = tick
        self.clock = clock
        self.canvas = Canvas(width, height)

        grid, self.road = generate_road(self.rng, width, height)
        for y, row in enumerate(grid):
            for x, ch in enumerate(row):
                self.canvas.set_content(x, y, ch)

        self.tower_locations = tower_placement(width, height, MAX_TOWERS, self.canvas, self.rng)

        start_h, start_w = self.road[0]
        log.debug("%s Enemy start", self.road[0])
        self.enemies: List[Enemy] = generate_enemies(tick, height, tick * 4, start_h, start_w)
        if self.enemies:
            shift = clock() - self.enemies[0].last_moved
            for enemy in self.enemies:
                enemy.last_moved += shift
                enemy.clock = clock
                self.canvas.set_content(enemy.w, enemy.h, " ")

        self.towers: List[Tower] = []

    def handle_click(self, x: int, y: int) -> Optional[Tower]:
        """Build a tower on the spot under column ``x``, row ``y`` if it is free."""
        location = allowed_to_place_tower(x, y, self.tower_locations)
        if location is None or not check_for_screen_before_place_tower(
            location[1], location[0], self.canvas
        ):
            log.debug("%d, %d :: Failed location pick", x, y)
            return None
        log.debug("%s :: Accepted location point", location)
        tower = place_a_tower(self.canvas, location[1], location[0], self.tick * 7)
        tower.clock = self.clock
        self.towers.append(tower)
        return tower

    def step(self, now: float) -> List[Enemy]:
        """Advance one frame at time ``now`` and return the enemies that moved."""
        moved: List[Enemy] = []
        waiting: List[Enemy] = []

        for enemy in self.enemies:
            if now - enemy.last_moved < enemy.interval:
                waiting.append(enemy)
                continue
            if enemy.road_state + 1 >= len(self.road):
                raise GameOver("an enemy reached the end of the road")
            self.canvas.set_content(enemy.w, enemy.h, " ")
            enemy.road_state += 1
            enemy.h, enemy.w = self.road[enemy.road_state]
            log.debug("%d W %d H :: Enemy movement", enemy.w, enemy.h)
            enemy.last_moved = now
            moved.append(enemy)
            enemy.draw(self.canvas)

        for tower in self.towers:
            for target in moved:
                if tower.unit_close_to_tower(target.w, target.h, tower.w, tower.h) and tower.can_attack_now():
                    target.take_damage(tower.attack())
                target.draw(self.canvas)

        self.enemies = waiting + [enemy for enemy in moved if enemy.hp > 0]
        return moved


def _run(stdscr, game: Game) -> None:
    import curses

    curses.mousemask(curses.ALL_MOUSE_EVENTS)
    curses.mouseinterval(0)
    stdscr.timeout(max(1, int(game.tick * 1000)))
    colored = curses.has_colors()
    if colored:
        curses.start_color()
        curses.use_default_colors()
    pairs: Dict[object, int] = {}
    names = {"red": curses.COLOR_RED, "lightskyblue": curses.COLOR_CYAN, "antiquewhite": curses.COLOR_WHITE}

    def index(color) -> int:
        if color is None:
            return -1
        if isinstance(color, str):
            return names.get(color, curses.COLOR_WHITE)
        return curses.COLOR_BLUE

    def render() -> None:
        for x, y, cell in game.canvas.cells():
            attr = 0
            key = (index(cell.style.foreground), index(cell.style.background))
            if colored and key != (-1, -1):
                if key not in pairs and len(pairs) + 1 < curses.COLOR_PAIRS:
                    curses.init_pair(len(pairs) + 1, *key)
                    pairs[key] = len(pairs) + 1
                attr = curses.color_pair(pairs.get(key, 0))
            try:
                stdscr.addstr(y, x, cell.ch or " ", attr)
            except curses.error:
                pass
        stdscr.refresh()

    render()
    next_frame = game.clock() + game.tick
    while True:
        key = stdscr.getch()
        if key in (27, ord("q")):
            return
        if key == curses.KEY_MOUSE:
            try:
                _, x, y, _, state = curses.getmouse()
            except curses.error:
                state = 0
            if state & (curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED):
                game.handle_click(x, y)
                render()
        now = game.clock()
        if now >= next_frame:
            next_frame = now + game.tick
            try:
                game.step(now)
            except GameOver:
                return
            render()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the game in the terminal; ``argv`` is accepted but takes no options."""
    import curses

    logging.basicConfig(filename="debug.log", filemode="w", level=logging.DEBUG, force=True)
    seed = time.time_ns()
    log.info("%d :: Seed chosen", seed)
    game = Game(rng=random.Random(seed))
    try:
        curses.wrapper(_run, game)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())