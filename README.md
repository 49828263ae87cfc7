# termtd

A small real-time tower defense game that runs in your terminal.

Each game draws a new winding road across a field of `#` land. Seven tower
slots are marked three rows above or below random points on the road. A wave
of three grunts (`○`) walks the road from left to right. Later grunts are
slower and have more hit points, and they start after a delay. Click a slot
to build a tower (`|*|`) there. A tower hits any enemy that steps within four
cells of it, then waits before it can fire again. An enemy flashes red for a
moment after each hit and disappears when its hit points run out.

## Installing

```
pip install .
```

The game uses the standard library's `curses` module, so it needs a platform
where `curses` is available, such as Linux or macOS.

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Playing

```
termtd
```

- Left-click a free tower slot to build a tower there. A click on a slot that
  already has a tower, or anywhere else, does nothing.
- Press `q` or `Esc` to quit. `Ctrl-C` also quits cleanly.
- The game ends when an enemy reaches the end of the road.

The game writes a debug trace to `debug.log` in the current directory and
overwrites it on each run. The random seed of the map is logged at the start.

The map is 180 columns by 25 rows. A smaller terminal shows only part of it.
The terminal must support mouse input.

## Limitations

There is only one wave of three enemies. The game has no score, no money or
build cost, no lives, and no win screen. When every enemy is dead, the map
stays on screen until you quit. The command has no options, and the seed
cannot be chosen from the command line.

## Using the pieces

The game logic draws on an in-memory `Canvas`, not on the terminal, so you can
drive it from code:

```python
import random

from termtd.road import generate_road

grid, road = generate_road(random.Random(42), 40, 12)
print("\n".join("".join(row) for row in grid))
```

```python
import random

from termtd.game import Game, GameOver

game = Game(rng=random.Random(1))
row, col = game.tower_locations[0]
tower = game.handle_click(col, row)   # returns the Tower, or None
try:
    moved = game.step(game.clock() + 1.0)
except GameOver:
    pass
```

- `termtd.canvas`: `Canvas`, a fixed-size grid of `Cell`s with a `Style`.
  It has `set_content`, `get_content`, `clear` and `cells`. Writes outside the
  grid are ignored.
- `termtd.road.generate_road(rng, width, height)` returns the map grid and the
  road's `(row, column)` points.
- `termtd.placement.tower_placement(width, height, max_tower, screen, rng)`
  marks tower slots beside the road on a canvas and returns their centres.
- `termtd.tower`: the `Tower` class (`unit_close_to_tower`, `attack`,
  `can_attack_now`), and `allowed_to_place_tower`,
  `check_for_screen_before_place_tower`, `place_a_tower`,
  `generate_tower_placeholder` and `euclidean_distance`.
- `termtd.enemy`: the `Enemy` class (`take_damage`, `must_flash`, `draw`) and
  `generate_enemies`.
- `termtd.game`: `Game` ties these together. `handle_click` builds towers and
  `step(now)` advances one frame. `step` raises `GameOver` when an enemy walks
  past the end of the road. `main` runs the game in the terminal.