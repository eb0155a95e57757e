import pytest

from astarstage.core import Color, CursorType
from astarstage.renderer import Cell, ScreenBuffer
from astarstage.vector2 import Vector2


def test_new_buffer_is_blank():
    buffer = ScreenBuffer(Vector2(4, 3))
    assert buffer.text() == "\n".join([" " * 4] * 3)
    assert all(cell == Cell() for cell in buffer.cells)


def test_new_buffer_hides_cursor():
    buffer = ScreenBuffer(Vector2(2, 2))
    assert buffer.cursor_visible is False
    assert buffer.cursor_size == 1


@pytest.mark.parametrize(
    "cursor_type, size, visible",
    [
        (CursorType.NO_CURSOR, 1, False),
        (CursorType.SOLID_CURSOR, 100, True),
        (CursorType.NORMAL_CURSOR, 20, True),
    ],
)
def test_set_cursor_type(cursor_type, size, visible):
    buffer = ScreenBuffer(Vector2(2, 2))
    buffer.set_cursor_type(cursor_type)
    assert (buffer.cursor_size, buffer.cursor_visible) == (size, visible)


def test_draw_reads_cells_row_by_row():
    buffer = ScreenBuffer(Vector2(3, 2))
    cells = [Cell(ch, int(Color.RED)) for ch in "abcdef"]
    buffer.draw(cells)
    assert buffer.text() == "abc\ndef"
    assert buffer.rows()[1][0] == Cell("d", int(Color.RED))


def test_draw_ignores_extra_cells():
    buffer = ScreenBuffer(Vector2(2, 1))
    buffer.draw([Cell("x"), Cell("y"), Cell("z")])
    assert buffer.text() == "xy"
    assert len(buffer.cells) == 2


def test_draw_with_too_few_cells_raises():
    buffer = ScreenBuffer(Vector2(2, 2))
    with pytest.raises(ValueError):
        buffer.draw([Cell("a")])


def test_null_character_shows_as_blank():
    buffer = ScreenBuffer(Vector2(2, 1))
    buffer.draw([Cell("\0"), Cell("q")])
    assert buffer.text() == " q"


def test_clear_restores_blank():
    buffer = ScreenBuffer(Vector2(2, 2))
    buffer.draw([Cell("z", int(Color.GREEN))] * 4)
    buffer.clear()
    assert buffer.text() == "  \n  "
    assert all(cell.attributes == 0 for cell in buffer.cells)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        ScreenBuffer(Vector2(-1, 2))