"""The game loop: input state, level updates and double-buffered text rendering."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Optional, TextIO, Union

from .core import Color, CursorType, Key
from .renderer import Cell, ScreenBuffer
from .vector2 import Vector2

_KEY_COUNT = 255
_HOME = "\x1b[H"
_RESET = "\x1b[0m"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"


@dataclass
class KeyState:
    """Whether a key is held in this frame and whether it was in the previous one."""

    is_key_down: bool = False
    was_key_down: bool = False


@dataclass(frozen=True)
class KeyEvent:
    """A key going down or coming up."""

    key_code: int
    key_down: bool


@dataclass(frozen=True)
class MouseEvent:
    """The mouse moving to a cell, with the state of its two main buttons."""

    position: Vector2
    left_pressed: bool = False
    right_pressed: bool = False


InputEvent = Union[KeyEvent, MouseEvent]


def _ansi_colour(attributes: int) -> str:
    bits = attributes & 0x7
    if bits == 0:
        return _RESET
    code = (1 if bits & 0x4 else 0) + (2 if bits & 0x2 else 0) + (4 if bits & 0x1 else 0)
    base = 90 if attributes & 0x8 else 30
    return f"\x1b[{base + code}m"


def _ansi_frame(buffer: ScreenBuffer) -> str:
    parts = [_HOME, _SHOW_CURSOR if buffer.cursor_visible else _HIDE_CURSOR]
    for row in buffer.rows():
        current = None
        for cell in row:
            if cell.attributes != current:
                current = cell.attributes
                parts.append(_ansi_colour(current))
            parts.append(" " if cell.char == "\0" else cell.char)
        parts.append(_RESET + "\n")
    return "".join(parts)


class Engine:
    """Runs the frame loop for one level and owns input and screen state."""

    _instance: ClassVar[Optional["Engine"]] = None

    def __init__(
        self,
        screen_size: Vector2,
        output: Optional[TextIO] = None,
        clock: Callable[[], float] = time.perf_counter,
        frame_limit: Optional[int] = None,
    ) -> None:
        Engine._instance = self
        self.screen_size = screen_size
        self.output = sys.stdout if output is None else output
        self.frame_limit = frame_limit
        self.frame_count = 0
        self.quit = False
        self.main_level: Any = None
        self.mouse_position = Vector2()
        self.key_state = [KeyState() for _ in range(_KEY_COUNT)]
        self.target_frame_rate = 60.0
        self.target_one_frame_time = 0.0
        self._clock = clock
        self._events: deque[InputEvent] = deque()

        self.set_target_frame_rate(60.0)

        self.image_buffer: list[Cell] = []
        self.clear_image_buffer()

        self.render_targets = (ScreenBuffer(screen_size), ScreenBuffer(screen_size))
        self.current_render_target_index = 0
        self.present()

    @property
    def renderer(self) -> ScreenBuffer:
        """The screen buffer currently drawn into."""
        return self.render_targets[self.current_render_target_index]

    def run(self) -> None:
        """Run frames at the target rate until the game is quit."""
        previous = self._clock()
        try:
            while not self.quit:
                if self.frame_limit is not None and self.frame_count >= self.frame_limit:
                    break
                current = self._clock()
                delta_time = current - previous
                if delta_time < self.target_one_frame_time:
                    time.sleep(self.target_one_frame_time - delta_time)
                    continue
                self.process_input()
                self.update(delta_time)
                self.render()
                self.save_previous_key_states()
                previous = current
                if self.main_level is not None:
                    self.main_level.process_added_and_destroyed_actors()
                self.frame_count += 1
        except KeyboardInterrupt:
            self.quit_game()

    def load_level(self, level: Any) -> None:
        """Make level the one that is updated and drawn."""
        self.main_level = level

    def add_actor(self, actor: Any) -> None:
        """Ask the current level to add actor; ignored without a level."""
        if self.main_level is None:
            return
        self.main_level.add_actor(actor)

    def destroy_actor(self, actor: Any) -> None:
        """Mark actor for removal; ignored without a level."""
        if self.main_level is None:
            return
        actor.destroy()

    def set_cursor_type(self, cursor_type: CursorType) -> None:
        """Change the cursor of the active screen buffer."""
        self.renderer.set_cursor_type(cursor_type)

    def draw(self, position: Vector2, image: str, color: Color = Color.WHITE) -> None:
        """Write image into the frame starting at position."""
        for offset, char in enumerate(image):
            index = position.y * self.screen_size.x + position.x + offset
            if not 0 <= index < len(self.image_buffer):
                raise IndexError(f"cell {index} is outside the screen buffer")
            self.image_buffer[index] = Cell(char, int(color))

    def set_target_frame_rate(self, target_frame_rate: float) -> None:
        """Set the frames per second the loop aims for."""
        if target_frame_rate <= 0:
            raise ValueError("target frame rate must be positive")
        self.target_frame_rate = target_frame_rate
        self.target_one_frame_time = 1.0 / target_frame_rate

    def post_event(self, event: InputEvent) -> None:
        """Queue an input event to be handled by a later frame."""
        if isinstance(event, KeyEvent):
            self._state(event.key_code)
        self._events.append(event)

    def _state(self, key: int) -> KeyState:
        if not 0 <= key < _KEY_COUNT:
            raise IndexError(f"key code out of range: {key}")
        return self.key_state[key]

    def get_key(self, key: int) -> bool:
        """Whether key is held down."""
        return self._state(key).is_key_down

    def get_key_down(self, key: int) -> bool:
        """Whether key went down in this frame."""
        state = self._state(key)
        return state.is_key_down and not state.was_key_down

    def get_key_up(self, key: int) -> bool:
        """Whether key came up in this frame."""
        state = self._state(key)
        return not state.is_key_down and state.was_key_down

    def quit_game(self) -> None:
        """Stop the loop after the current frame."""
        self.quit = True

    @staticmethod
    def get() -> "Engine":
        """The most recently created engine."""
        if Engine._instance is None:
            raise RuntimeError("no engine has been created")
        return Engine._instance

    def process_input(self) -> None:
        """Apply at most one queued input event to the key and mouse state."""
        if not self._events:
            return
        event = self._events.popleft()
        if isinstance(event, KeyEvent):
            self._state(event.key_code).is_key_down = event.key_down
        else:
            self.mouse_position = event.position
            self.key_state[Key.LBUTTON].is_key_down = event.left_pressed
            self.key_state[Key.RBUTTON].is_key_down = event.right_pressed

    def update(self, delta_time: float) -> None:
        """Update the current level."""
        if self.main_level is not None:
            self.main_level.update(delta_time)

    def clear(self) -> None:
        """Blank the frame being built."""
        self.clear_image_buffer()

    def render(self) -> None:
        """Build the frame from the level, copy it to the back buffer and show it."""
        self.clear()
        if self.main_level is not None:
            self.main_level.draw()
        self.renderer.draw(self.image_buffer)
        self.present()

    def present(self) -> None:
        """Show the current buffer and switch to the other one."""
        self.output.write(_ansi_frame(self.renderer))
        self.output.flush()
        self.current_render_target_index = 1 - self.current_render_target_index

    def save_previous_key_states(self) -> None:
        """Remember this frame's key states for edge detection in the next one."""
        for state in self.key_state:
            state.was_key_down = state.is_key_down

    def clear_image_buffer(self) -> None:
        """Reset the frame to blanks, ending with a terminating null cell."""
        count = (self.screen_size.x + 1) * self.screen_size.y + 1
        self.image_buffer = [Cell() for _ in range(count)]
        self.image_buffer[-1] = Cell("\0")

    def frame_text(self) -> str:
        """The characters of the frame being built, as lines."""
        width = self.screen_size.x
        return "\n".join(
            "".join(
                " " if cell.char == "\0" else cell.char
                for cell in self.image_buffer[row * width:(row + 1) * width]
            )
            for row in range(self.screen_size.y)
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Run an empty engine until interrupted or the frame limit is reached."""
    parser = argparse.ArgumentParser(description="Run the text-mode game engine.")
    parser.add_argument("--width", type=int, default=50)
    parser.add_argument("--height", type=int, default=20)
    parser.add_argument("--frames", type=int, default=None)
    args = parser.parse_args(argv)
    engine = Engine(Vector2(args.width, args.height), output=sys.stdout, frame_limit=args.frames)
    engine.run()
    return 0