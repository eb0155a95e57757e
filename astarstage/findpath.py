"""Path-finding demo: a map of walls, a start and an end, and a player walking the path."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Union

from .actor import DrawableActor
from .core import Color, Key
from .engine import Engine
from .level import Level
from .pathfinding import AStar, Node
from .timer import Timer
from .vector2 import Vector2

_STEP_INTERVAL = 0.2
_WALL_CELL = "1"
_OPEN_CELL = " "


class Wall(DrawableActor):
    """A wall tile drawn as a red bar."""

    def __init__(self, position: Vector2) -> None:
        super().__init__("|", position, Color.RED)


class Ground(DrawableActor):
    """A walkable tile drawn as a blank."""

    def __init__(self, position: Vector2) -> None:
        super().__init__(" ", position, Color.WHITE)


class Space(DrawableActor):
    """An unknown map tile, drawn as a dot and treated as blocked."""

    def __init__(self, position: Vector2) -> None:
        super().__init__(".", position, Color.WHITE)


class Player(DrawableActor):
    """The walker that follows the found path; Escape quits the game."""

    def __init__(self) -> None:
        super().__init__("p", Vector2(5, 5), Color.GREEN)
        self.node = Node(self.position)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()
        if engine.get_key_down(Key.ESCAPE):
            engine.quit_game()


class Start(DrawableActor):
    """The start marker, placed with a left click."""

    def __init__(self) -> None:
        super().__init__("s", Vector2(), Color.BLUE)
        self.node: Optional[Node] = None

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()
        if engine.get_key_down(Key.LBUTTON):
            self.position = engine.mouse_position
            self.node = Node(self.position)


class End(DrawableActor):
    """The goal marker, moved with a right click."""

    def __init__(self) -> None:
        super().__init__("e", Vector2(10, 6), Color.RED)
        self.node = Node(self.position)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()
        if engine.get_key_down(Key.RBUTTON):
            self.position = engine.mouse_position
            self.node.position = self.position


class DemoLevel(Level):
    """A level built from a map file in which the player walks from start to end."""

    def __init__(self, map_path: Union[str, Path]) -> None:
        super().__init__()
        self.a_star = AStar(allow_blocked_goal=True)
        self.maps: list[list[str]] = []
        self.node_list: list[Node] = []
        self.index = 0
        self.start_position = Vector2()
        self.start: Optional[Start] = None
        self.end: Optional[End] = None
        self.player: Optional[Player] = None
        self.timer = Timer(_STEP_INTERVAL)
        self.load_map(map_path)

    @property
    def map_size(self) -> Vector2:
        """Width and height of the loaded map."""
        width = max((len(row) for row in self.maps), default=0)
        return Vector2(width, len(self.maps))

    def load_map(self, map_path: Union[str, Path]) -> None:
        """Read a map file, adding a tile actor per character and a grid row per line."""
        data = Path(map_path).read_bytes()
        x = 0
        y = 0
        row: list[str] = []
        for char in data.decode("latin-1"):
            if char == "\n":
                y += 1
                x = 0
                self.maps.append(row)
                row = []
                continue
            position = Vector2(x, y)
            if char == "1":
                self.add_actor(Wall(position))
                row.append(_WALL_CELL)
            elif char == ".":
                self.add_actor(Ground(position))
                row.append(_OPEN_CELL)
            else:
                self.add_actor(Space(position))
                row.append(_WALL_CELL)
            x += 1

    def find_path(self) -> None:
        """Search a new path from the start marker to the end marker."""
        if self.start is None or self.end is None or self.start.node is None:
            raise RuntimeError("start and end must be placed before searching a path")
        self.node_list = []
        self.index = 0
        self.start_position = self.start.position
        self.node_list = self.a_star.find_path(self.start.node, self.end.node, self.maps)

    def set_point(self) -> None:
        """Create the start, end and player actors and add them to the level."""
        self.start = Start()
        self.end = End()
        self.player = Player()
        self.add_actor(self.start)
        self.add_actor(self.end)
        self.add_actor(self.player)

    def update(self, delta_time: float) -> None:
        """Update actors, search again when the start moved, and step the player."""
        super().update(delta_time)

        if self.start is not None and self.start_position != self.start.position:
            self.find_path()

        self.timer.update(delta_time)
        if self.timer.is_time_out():
            self.timer.reset()
            if self.player is not None and self.index < len(self.node_list):
                self.player.position = self.node_list[self.index].position
                self.index += 1

    def draw(self) -> None:
        """Draw every active actor."""
        super().draw()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the path-finding demo on a map file."""
    parser = argparse.ArgumentParser(description="Find a path across a text map.")
    parser.add_argument("map", help="path of the map file")
    parser.add_argument("--frames", type=int, default=None)
    args = parser.parse_args(argv)
    level = DemoLevel(args.map)
    engine = Engine(level.map_size, output=sys.stdout, frame_limit=args.frames)
    engine.load_level(level)
    level.set_point()
    engine.run()
    return 0