"""Breadth-first reachability and graph distances over a maze."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from ..base import DIRECTIONS, Coord
from .model import Maze

logger = logging.getLogger(__name__)


@dataclass
class ReachabilityResult:
    origin: Coord
    visited: Set[Coord]
    distance: Dict[Coord, int]
    order: List[Coord] = field(default_factory=list)
    truncated: bool = False

    def __contains__(self, coord: object) -> bool:
        return coord in self.visited

    def __len__(self) -> int:
        return len(self.visited)

    def distance_to(self, coord: Coord) -> Optional[int]:
        return self.distance.get(coord)

    def farthest(self) -> Tuple[Coord, int]:
        """The first cell reached at the greatest distance from the origin."""

        best = self.origin
        for coord in self.order:
            if self.distance[coord] > self.distance[best]:
                best = coord
        return best, self.distance[best]

    def as_array(self, shape: Tuple[int, int]) -> np.ndarray:
        """Distance grid of ``shape`` with ``-1`` for unreached cells."""

        grid = np.full(shape, -1, dtype=np.int32)
        for coord, dist in self.distance.items():
            grid[coord] = dist
        return grid

    def to_dict(self) -> dict:
        return {
            "origin": list(self.origin),
            "reachable": len(self.visited),
            "distance": [[list(coord), dist] for coord, dist in sorted(self.distance.items())],
            "truncated": self.truncated,
        }


def reachable_from(origin: Coord, maze: Maze) -> ReachabilityResult:
    """Collect every cell reachable from ``origin`` with its BFS distance.

    An edge exists only when both cells agree the shared wall is open. The
    search is capped at ``rows * cols`` expansions; hitting the cap means the
    wall data is inconsistent, so it is logged and flagged rather than raised.
    Only reads the maze.
    """

    maze.walls_at(origin)
    cap = maze.size
    distance: Dict[Coord, int] = {origin: 0}
    order: List[Coord] = [origin]
    queue: deque[Coord] = deque([origin])
    expanded = 0
    truncated = False
    while queue:
        if expanded >= cap:
            truncated = True
            logger.warning(
                "Reachability cap of %d cells exceeded from %s on a %dx%d maze; wall data is inconsistent",
                cap,
                origin,
                maze.rows,
                maze.cols,
            )
            break
        current = queue.popleft()
        expanded += 1
        for direction in DIRECTIONS:
            if not maze.can_pass(current, direction):
                continue
            nxt = direction.step(current)
            if nxt in distance or not maze.can_pass(nxt, direction.opposite):
                continue
            distance[nxt] = distance[current] + 1
            order.append(nxt)
            queue.append(nxt)
    return ReachabilityResult(
        origin=origin,
        visited=set(distance),
        distance=distance,
        order=order,
        truncated=truncated,
    )


def graph_distance(origin: Coord, target: Coord, maze: Maze) -> Optional[int]:
    """Shortest path length through open passages, or ``None`` if unreachable."""

    maze.walls_at(target)
    return reachable_from(origin, maze).distance_to(target)


__all__ = ["ReachabilityResult", "reachable_from", "graph_distance"]
