# astarstage

A small text-mode game engine built on a character grid, with an A* path
search and two demo levels.

The engine runs a fixed-rate game loop (60 frames per second by default).
Each frame it applies at most one queued input event, updates the current
level's actors, draws them into a frame of character cells, and writes that
frame to the terminal with ANSI escape codes, switching between two screen
buffers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Commands

All three commands draw to standard output and run until interrupted with
Ctrl+C, or until `--frames N` frames have been drawn.

- `astarstage [--width W] [--height H] [--frames N]`: runs an engine with no
  level on a W×H screen (50×20 by default).
- `astarstage-findpath MAP [--frames N]`: loads the map file `MAP` and sizes
  the screen to it. Each line of the file is one row of the grid and must end
  with a newline; a final line without one adds tiles to the screen but not to
  the search grid. In the file, `1` is a wall (drawn as a red `|`), `.` is open
  floor (drawn as a blank) and any other character is blocked space (drawn as
  `.`). The level then places a start marker `s` at (0, 0), a goal `e` at
  (10, 6) and a player `p` at (5, 5). A left click moves the start marker and
  starts a new search; a right click moves the goal. Every 0.2 seconds the
  player steps to the next cell of the found path. The goal may lie on a
  blocked cell. Escape quits.
- `astarstage-clickdemo [--width W] [--height H] [--frames N]`: places a red
  start marker `s` at (0, 0) and a green player marker `e` at (5, 5). A left
  click moves the start marker to the mouse, a right click moves the player
  marker, and Escape quits.

## What the package does not do

The engine does not read the keyboard or the mouse from the terminal. Input
reaches it only through `Engine.post_event`, so when the commands are run
from a shell, clicks and Escape have no effect; the demos are driven from
Python code that posts `KeyEvent` and `MouseEvent` objects.

## Library use

- `astarstage.vector2.Vector2`: an immutable integer grid coordinate that
  supports `+`, `-` and `==`.
- `astarstage.timer.Timer(time)`: `update(delta_time)` adds to the elapsed
  time, `is_time_out()` is true once it reaches `time`, `reset()` sets it
  back to zero.
- `astarstage.core`: the `Color`, `CursorType` and `Key` enumerations,
  `random_int(low, high)` (both ends inclusive), `random_percent(low, high)`,
  and `log(fmt, *args)`, which writes a printf-style message to standard
  output and returns it.
- `astarstage.actor.Actor` and `astarstage.actor.DrawableActor`: objects held
  by a level. `destroy()` marks an actor for removal and `set_active(False)`
  stops it being updated and drawn. A `DrawableActor` draws its `image` string
  at its `position` in its `color` through the current engine; `intersect`
  tells whether two images overlap on the same row.
- `astarstage.level.Level`: holds actors. Actors passed to `add_actor` join,
  and destroyed actors leave, when `process_added_and_destroyed_actors()` runs
  at the end of a frame.
- `astarstage.engine.Engine(screen_size, output=None, clock=time.perf_counter,
  frame_limit=None)`: the game loop. `Engine.get()` returns the most recently
  created engine. `load_level`, `run` and `quit_game` control the loop;
  `get_key`, `get_key_down` and `get_key_up` answer input queries;
  `mouse_position` holds the last mouse cell; `frame_text()` returns the frame
  being built as lines of text.
- `astarstage.renderer.ScreenBuffer` and `Cell`: the in-memory screen buffers
  the engine draws into; `text()` returns a buffer's characters.
- `astarstage.pathfinding.AStar` and `Node`: A* search with eight-way
  movement. Straight steps cost 1.0 and diagonal steps 1.414; the heuristic is
  the Euclidean distance to the goal. Grid cells equal to `1` or `"1"` are
  walls. `AStar(allow_blocked_goal=True)` lets the goal sit on a wall.

A path search:

```python
from astarstage.pathfinding import AStar, Node
from astarstage.vector2 import Vector2

grid = [
    [0, 0, 0],
    [0, 1, 0],
    [0, 0, 0],
]
search = AStar()
path = search.find_path(Node(Vector2(0, 0)), Node(Vector2(2, 2)), grid)
search.display_grid_with_path(grid, path)
```

`find_path` returns the nodes from start to goal, or an empty list when the
goal cannot be reached. `display_grid_with_path` writes `2` into the grid
along the path, then prints the grid (walls as `1`, path as `*`, empty cells
as `0`) and returns the printed text.