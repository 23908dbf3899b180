"""Perfect maze generation by randomized depth-first carving."""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from ..base import DIRECTIONS, Coord, Direction, Wall
from ..errors import InvalidDimensions
from ..rng import SplitMix64
from .model import Maze

logger = logging.getLogger(__name__)


class MazeGenerator:
    """Carve spanning-tree mazes over a ``rows x cols`` grid.

    Carving starts from ``start`` with every wall in place and walks an
    explicit stack, so large grids never hit the recursion limit. Afterwards
    the entrance (bottom side of ``start``) and the exit (top side of the
    diagonally opposite cell) are opened.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        *,
        rng: Optional[SplitMix64] = None,
        seed: Optional[int] = None,
        start: Coord = (0, 0),
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidDimensions(rows, cols)
        self.rows = rows
        self.cols = cols
        self.start = tuple(start)
        self._rng = rng if rng is not None else SplitMix64(seed)

    @property
    def end(self) -> Coord:
        return self.rows - 1 - self.start[0], self.cols - 1 - self.start[1]

    def generate(self) -> Maze:
        maze = Maze(self.rows, self.cols, fill=Wall.ALL)
        self._carve(maze)
        maze.set_wall(self.start, Direction.DOWN, False)
        maze.set_wall(self.end, Direction.UP, False)
        logger.debug(
            "Generated %dx%d maze with %d passages",
            self.rows,
            self.cols,
            maze.passage_count(),
        )
        return maze

    def _carve(self, maze: Maze) -> None:
        visited = np.zeros((self.rows, self.cols), dtype=bool)
        visited[self.start] = True
        stack: List[Coord] = [self.start]
        while stack:
            current = stack[-1]
            candidates: List[Direction] = []
            for direction in DIRECTIONS:
                other = maze.neighbor(current, direction)
                if other is not None and not visited[other]:
                    candidates.append(direction)
            if not candidates:
                stack.pop()
                continue
            direction = self._rng.choice(candidates)
            chosen = direction.step(current)
            maze.set_wall(current, direction, False)
            visited[chosen] = True
            stack.append(chosen)


def generate_maze(
    rows: int,
    cols: int,
    rng: Optional[SplitMix64] = None,
    *,
    seed: Optional[int] = None,
    start: Coord = (0, 0),
) -> Maze:
    """Build a perfect maze; ``rng`` takes precedence over ``seed``."""

    return MazeGenerator(rows, cols, rng=rng, seed=seed, start=start).generate()


__all__ = ["MazeGenerator", "generate_maze"]
