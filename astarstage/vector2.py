"""Integer two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """A point or offset on the character grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)