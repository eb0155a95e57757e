"""In-memory console screen buffers used for double-buffered drawing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .core import CursorType
from .vector2 import Vector2

_CURSOR_SHAPES = {
    CursorType.NO_CURSOR: (1, False),
    CursorType.SOLID_CURSOR: (100, True),
    CursorType.NORMAL_CURSOR: (20, True),
}


@dataclass(frozen=True)
class Cell:
    """One character cell: the character and its colour attributes."""

    char: str = " "
    attributes: int = 0


class ScreenBuffer:
    """A width x height grid of cells with a cursor shape."""

    def __init__(self, size: Vector2) -> None:
        if size.x < 0 or size.y < 0:
            raise ValueError(f"screen size must not be negative: {size}")
        self.size = size
        self.cells: list[Cell] = [Cell() for _ in range(size.x * size.y)]
        self.cursor_size = 1
        self.cursor_visible = False

    def set_cursor_type(self, cursor_type: CursorType) -> None:
        """Change the cursor's size and visibility."""
        self.cursor_size, self.cursor_visible = _CURSOR_SHAPES[cursor_type]

    def clear(self) -> None:
        """Fill the whole buffer with blank cells."""
        self.cells = [Cell() for _ in range(self.size.x * self.size.y)]

    def draw(self, cells: Sequence[Cell]) -> None:
        """Copy a full screen of cells, read row by row, into the buffer."""
        count = self.size.x * self.size.y
        if len(cells) < count:
            raise ValueError(f"need at least {count} cells, got {len(cells)}")
        self.cells = list(cells[:count])

    def rows(self) -> list[list[Cell]]:
        """The buffer's cells split into rows."""
        width = self.size.x
        return [self.cells[row * width:(row + 1) * width] for row in range(self.size.y)]

    def text(self) -> str:
        """The buffer's characters as lines joined by newlines."""
        return "\n".join(
            "".join(" " if cell.char == "\0" else cell.char for cell in row)
            for row in self.rows()
        )