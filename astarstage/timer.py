"""Countdown timer driven by frame delta times."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Timer:
    """Accumulates elapsed time and reports when a set duration has passed."""

    time: float
    elapsed: float = field(default=0.0, init=False)

    def update(self, delta_time: float) -> None:
        """Advance the timer by delta_time seconds."""
        self.elapsed += delta_time

    def reset(self) -> None:
        """Start counting from zero again."""
        self.elapsed = 0.0

    def is_time_out(self) -> bool:
        """Whether the elapsed time has reached the set duration."""
        return self.elapsed >= self.time