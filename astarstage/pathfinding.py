"""A* path search on a grid with eight-way movement."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import MutableSequence, Optional, Sequence

from .vector2 import Vector2

_STRAIGHT = 1.0
_DIAGONAL = 1.414

# Down, up, right, left, then the four diagonals.
_DIRECTIONS = (
    (0, 1, _STRAIGHT),
    (0, -1, _STRAIGHT),
    (1, 0, _STRAIGHT),
    (-1, 0, _STRAIGHT),
    (1, 1, _DIAGONAL),
    (1, -1, _DIAGONAL),
    (-1, 1, _DIAGONAL),
    (-1, -1, _DIAGONAL),
)

_OBSTACLES = (1, "1")
_EMPTY = (0, "0", " ")
_PATH_MARK = 2


@dataclass(eq=False)
class Node:
    """A grid position reached during the search, with its costs and predecessor."""

    position: Vector2 = field(default_factory=Vector2)
    parent: Optional[Node] = None
    g_cost: float = 0.0
    h_cost: float = 0.0
    f_cost: float = 0.0

    def __sub__(self, other: Node) -> Vector2:
        return self.position - other.position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)


class AStar:
    """Finds a shortest path between two nodes on a grid whose 1 cells are walls."""

    def __init__(self, allow_blocked_goal: bool = False) -> None:
        self.allow_blocked_goal = allow_blocked_goal
        self._open: list[Node] = []
        self._closed: list[Node] = []
        self._start: Optional[Node] = None
        self._goal: Optional[Node] = None

    def find_path(self, start: Node, goal: Node, grid: Sequence[Sequence[object]]) -> list[Node]:
        """Return the nodes from start to goal, or an empty list if goal is unreachable."""
        self._start = start
        self._goal = goal
        self._open = [start]
        self._closed = []

        while self._open:
            current = min(self._open, key=lambda node: node.f_cost)
            if current == goal:
                return self._construct_path(current)

            del self._open[self._open.index(current)]
            if current in self._closed:
                continue
            self._closed.append(current)

            for dx, dy, cost in _DIRECTIONS:
                x = current.position.x + dx
                y = current.position.y + dy
                if not self._in_range(x, y, grid):
                    continue
                if grid[y][x] in _OBSTACLES and not (
                    self.allow_blocked_goal and goal.position == Vector2(x, y)
                ):
                    continue
                g_cost = current.g_cost + cost
                if self._has_visited(x, y, g_cost):
                    continue

                neighbor = Node(Vector2(x, y), current, g_cost)
                neighbor.h_cost = self._heuristic(neighbor, goal)
                neighbor.f_cost = neighbor.g_cost + neighbor.h_cost

                existing = next((node for node in self._open if node == neighbor), None)
                if (
                    existing is None
                    or neighbor.g_cost < existing.g_cost
                    or neighbor.f_cost < existing.f_cost
                ):
                    self._open.append(neighbor)

        return []

    def display_grid_with_path(
        self, grid: MutableSequence[MutableSequence[object]], path: Sequence[Node]
    ) -> str:
        """Mark path on grid with 2 and print it: walls as 1, path as *, empty as 0."""
        for node in path:
            grid[node.position.y][node.position.x] = _PATH_MARK

        lines = []
        for row in grid:
            cells = []
            for cell in row:
                if cell in _OBSTACLES:
                    cells.append("1 ")
                elif cell == _PATH_MARK:
                    cells.append("* ")
                elif cell in _EMPTY:
                    cells.append("0 ")
            lines.append("".join(cells) + "\n")
        text = "".join(lines)
        sys.stdout.write(text)
        return text

    @staticmethod
    def _construct_path(goal: Node) -> list[Node]:
        path = []
        node: Optional[Node] = goal
        while node is not None:
            path.append(node)
            node = node.parent
        path.reverse()
        return path

    @staticmethod
    def _heuristic(node: Node, goal: Node) -> float:
        diff = node - goal
        return math.hypot(diff.x, diff.y)

    @staticmethod
    def _in_range(x: int, y: int, grid: Sequence[Sequence[object]]) -> bool:
        return 0 <= y < len(grid) and 0 <= x < len(grid[0])

    def _has_visited(self, x: int, y: int, g_cost: float) -> bool:
        target = Vector2(x, y)
        for nodes in (self._open, self._closed):
            for node in list(nodes):
                if node.position != target:
                    continue
                if g_cost > node.g_cost:
                    return True
                nodes.remove(node)
        return False