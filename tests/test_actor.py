import io

import pytest

from astarstage.actor import Actor, DrawableActor
from astarstage.core import Color
from astarstage.engine import Engine
from astarstage.vector2 import Vector2


@pytest.fixture
def engine():
    return Engine(Vector2(10, 3), output=io.StringIO())


def test_actor_starts_active_at_origin():
    actor = Actor()
    assert actor.is_active() is True
    assert actor.position == Vector2(0, 0)


def test_set_active_false_deactivates():
    actor = Actor()
    actor.set_active(False)
    assert actor.is_active() is False
    actor.set_active(True)
    assert actor.is_active() is True


def test_destroy_overrides_active():
    actor = Actor()
    actor.destroy()
    assert actor.expired is True
    assert actor.is_active() is False


def test_width_follows_image():
    assert DrawableActor("abc").width == 3
    assert DrawableActor().width == 0


def test_draw_writes_image_into_frame(engine):
    actor = DrawableActor("ab", Vector2(2, 1), Color.GREEN)
    actor.draw()
    lines = engine.frame_text().split("\n")
    assert lines[1] == "  ab" + " " * 6
    assert lines[0] == " " * 10
    index = 1 * 10 + 2
    assert engine.image_buffer[index].char == "a"
    assert engine.image_buffer[index].attributes == int(Color.GREEN)


def test_intersect_overlapping_same_row():
    first = DrawableActor("abc", Vector2(0, 0))
    second = DrawableActor("xy", Vector2(1, 0))
    assert first.intersect(second) is True
    assert second.intersect(first) is True


def test_intersect_touching_edge_counts():
    first = DrawableActor("ab", Vector2(0, 0))
    second = DrawableActor("c", Vector2(2, 0))
    assert first.intersect(second) is True


def test_intersect_different_rows():
    first = DrawableActor("abc", Vector2(0, 0))
    second = DrawableActor("abc", Vector2(0, 1))
    assert first.intersect(second) is False


def test_intersect_far_apart():
    first = DrawableActor("a", Vector2(0, 0))
    second = DrawableActor("b", Vector2(5, 0))
    assert first.intersect(second) is False
    assert second.intersect(first) is False