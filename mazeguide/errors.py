"""Exception types raised by the maze core."""

from __future__ import annotations

from typing import Tuple


class MazeError(Exception):
    """Base class for maze core failures."""


class InvalidDimensions(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive row or column count."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(f"Maze dimensions must be positive, got rows={rows}, cols={cols}")
        self.rows = rows
        self.cols = cols


class OutOfBounds(MazeError, IndexError):
    """Raised when a coordinate falls outside the grid.

    External input never produces coordinates directly, so hitting this means
    internal coordinate math is wrong.
    """

    def __init__(self, coord: Tuple[int, int], shape: Tuple[int, int]) -> None:
        super().__init__(f"Coordinate {coord} is outside a {shape[0]}x{shape[1]} grid")
        self.coord = coord
        self.shape = shape


__all__ = ["MazeError", "InvalidDimensions", "OutOfBounds"]
