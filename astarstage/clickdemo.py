"""Click demo: a start marker and a player moved to the mouse by clicks."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from .actor import DrawableActor
from .core import Color, Key
from .engine import Engine
from .level import Level
from .vector2 import Vector2


class Player(DrawableActor):
    """Moves to the mouse on a right click; Escape quits the game."""

    def __init__(self) -> None:
        super().__init__("e", Vector2(5, 5), Color.GREEN)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()
        if engine.get_key_down(Key.ESCAPE):
            engine.quit_game()
        if engine.get_key_down(Key.RBUTTON):
            self.position = engine.mouse_position


class Start(DrawableActor):
    """Moves to the mouse on a left click."""

    def __init__(self) -> None:
        super().__init__("s", Vector2(), Color.RED)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        engine = Engine.get()
        if engine.get_key_down(Key.LBUTTON):
            self.position = engine.mouse_position


class DemoLevel(Level):
    """A level holding one start marker and one player."""

    def __init__(self) -> None:
        super().__init__()
        self.add_actor(Start())
        self.add_actor(Player())


def main(argv: Optional[list[str]] = None) -> int:
    """Run the click demo."""
    parser = argparse.ArgumentParser(description="Move markers with mouse clicks.")
    parser.add_argument("--width", type=int, default=50)
    parser.add_argument("--height", type=int, default=20)
    parser.add_argument("--frames", type=int, default=None)
    args = parser.parse_args(argv)
    engine = Engine(Vector2(args.width, args.height), output=sys.stdout, frame_limit=args.frames)
    engine.load_level(DemoLevel())
    engine.run()
    return 0