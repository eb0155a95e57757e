"""Objects placed in a level: plain actors and actors drawn as text."""

from __future__ import annotations

from .core import Color
from .engine import Engine
from .vector2 import Vector2


class Actor:
    """A thing in a level with a position that is updated and drawn every frame."""

    def __init__(self, position: Vector2 = Vector2()) -> None:
        self.position = position
        self.active = True
        self.expired = False

    def update(self, delta_time: float) -> None:
        """Advance the actor by one frame; does nothing by default."""

    def draw(self) -> None:
        """Draw the actor; does nothing by default."""

    def is_active(self) -> bool:
        """Whether the actor is enabled and has not been asked to go away."""
        return self.active and not self.expired

    def set_active(self, active: bool) -> None:
        """Enable or disable the actor."""
        self.active = active

    def destroy(self) -> None:
        """Ask the level to remove the actor at the end of the frame."""
        self.expired = True


class DrawableActor(Actor):
    """An actor shown on screen as a line of text in one colour."""

    def __init__(
        self,
        image: str = "",
        position: Vector2 = Vector2(),
        color: Color = Color.WHITE,
    ) -> None:
        super().__init__(position)
        self.image = image
        self.color = color

    @property
    def width(self) -> int:
        """Number of cells the image covers."""
        return len(self.image)

    def draw(self) -> None:
        """Write the image into the running engine's frame."""
        super().draw()
        Engine.get().draw(self.position, self.image, self.color)

    def intersect(self, other: DrawableActor) -> bool:
        """Whether the two images overlap on the same row."""
        low = self.position.x
        high = self.position.x + self.width
        other_low = other.position.x
        other_high = other.position.x + other.width
        if other_low > high or other_high < low:
            return False
        return self.position.y == other.position.y