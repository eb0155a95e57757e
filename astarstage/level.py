"""A level: the set of actors updated and drawn each frame."""

from __future__ import annotations

from .actor import Actor


class Level:
    """Holds actors and applies pending additions and removals between frames."""

    def __init__(self) -> None:
        self.actors: list[Actor] = []
        self.add_requested_actors: list[Actor] = []

    def add_actor(self, actor: Actor) -> None:
        """Queue actor to join the level at the end of the frame."""
        self.add_requested_actors.append(actor)

    def process_added_and_destroyed_actors(self) -> None:
        """Drop destroyed actors, then add the queued ones."""
        self.actors = [actor for actor in self.actors if not actor.expired]
        if self.add_requested_actors:
            self.actors.extend(self.add_requested_actors)
            self.add_requested_actors.clear()

    def update(self, delta_time: float) -> None:
        """Update every active actor."""
        for actor in self.actors:
            if actor.is_active():
                actor.update(delta_time)

    def draw(self) -> None:
        """Draw every active actor."""
        for actor in self.actors:
            if actor.is_active():
                actor.draw()