"""Wall data for a rectangular maze and the primitives that query and carve it."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..base import DIRECTIONS, Coord, Direction, Wall
from ..errors import InvalidDimensions, OutOfBounds


class Maze:
    """A ``rows x cols`` grid of per-cell wall bitmasks.

    Wall flags between two neighbours are one shared fact: :meth:`set_wall`
    always writes both sides, and nothing else writes the grid.
    """

    def __init__(self, rows: int, cols: int, *, fill: Wall = Wall.NONE) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(rows, cols)
        self.rows = rows
        self.cols = cols
        self._walls = np.full((rows, cols), int(fill), dtype=np.uint8)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise OutOfBounds(coord, self.shape)

    def index(self, coord: Coord) -> int:
        """Row-major linear index of ``coord``."""

        self._check(coord)
        return coord[0] * self.cols + coord[1]

    def cells(self) -> Iterator[Coord]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def walls_at(self, coord: Coord) -> Wall:
        self._check(coord)
        return Wall(int(self._walls[coord]))

    def has_wall(self, coord: Coord, side: Direction) -> bool:
        return bool(self.walls_at(coord) & side.wall)

    def neighbor(self, coord: Coord, direction: Direction) -> Optional[Coord]:
        self._check(coord)
        target = direction.step(coord)
        return target if self.in_bounds(target) else None

    def set_wall(self, coord: Coord, side: Direction, present: bool) -> None:
        """Set or clear ``side`` on ``coord`` and mirror it onto the neighbour."""

        self._write(coord, side.wall, present)
        other = self.neighbor(coord, side)
        if other is not None:
            self._write(other, side.opposite.wall, present)

    def _write(self, coord: Coord, flag: Wall, present: bool) -> None:
        current = int(self._walls[coord])
        bit = int(flag)
        self._walls[coord] = (current | bit) if present else (current & ~bit & int(Wall.ALL))

    def can_pass(self, coord: Coord, direction: Direction) -> bool:
        if self.neighbor(coord, direction) is None:
            return False
        return not self.has_wall(coord, direction)

    # ------------------------------------------------------------------

    def passage_count(self) -> int:
        """Number of open passages between in-bounds neighbours, each counted once."""

        count = 0
        for coord in self.cells():
            for direction in (Direction.UP, Direction.RIGHT):
                if self.can_pass(coord, direction):
                    count += 1
        return count

    def boundary_openings(self) -> List[Tuple[Coord, Direction]]:
        """Sides on the outer edge of the grid that have no wall."""

        openings: List[Tuple[Coord, Direction]] = []
        for coord in self.cells():
            for direction in DIRECTIONS:
                if self.neighbor(coord, direction) is None and not self.has_wall(coord, direction):
                    openings.append((coord, direction))
        return openings

    def as_array(self) -> np.ndarray:
        """Read-only copy of the wall bitmasks, indexed ``[row, col]``."""

        view = self._walls.copy()
        view.setflags(write=False)
        return view

    def copy(self) -> "Maze":
        clone = Maze(self.rows, self.cols)
        clone._walls = self._walls.copy()
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._walls, other._walls))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Maze(rows={self.rows}, cols={self.cols})"

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "walls": self._walls.astype(int).tolist(),
        }


__all__ = ["Maze"]
