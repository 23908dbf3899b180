"""Shared primitives for grid coordinates, directions and wall sides."""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import Tuple

Coord = Tuple[int, int]


class Wall(IntFlag):
    """Bitmask of the blocked sides of a single cell."""

    NONE = 0
    UP = 1 << 0
    RIGHT = 1 << 1
    DOWN = 1 << 2
    LEFT = 1 << 3
    ALL = UP | RIGHT | DOWN | LEFT


class Direction(Enum):
    """The four cardinal moves. Rows grow upward, columns grow rightward."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def delta(self) -> Coord:
        return _DELTAS[self]

    @property
    def wall(self) -> Wall:
        return _WALLS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def step(self, coord: Coord) -> Coord:
        dr, dc = self.delta
        return coord[0] + dr, coord[1] + dc

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Map user text such as ``"u"``, ``"Up"`` or ``"left"`` to a direction."""

        key = text.strip().lower()
        for direction in cls:
            if key == direction.value or key == direction.value[0]:
                return direction
        raise ValueError(f"Unknown direction: {text!r}")


# Fixed enumeration order for neighbour scans; seeded runs depend on it.
DIRECTIONS: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)

_DELTAS = {
    Direction.UP: (1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, -1),
}

_WALLS = {
    Direction.UP: Wall.UP,
    Direction.RIGHT: Wall.RIGHT,
    Direction.DOWN: Wall.DOWN,
    Direction.LEFT: Wall.LEFT,
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


__all__ = ["Coord", "Wall", "Direction", "DIRECTIONS", "manhattan"]
