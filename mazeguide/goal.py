"""Goal placement restricted to cells the agent can actually reach."""

from __future__ import annotations

import logging
from typing import Optional

from .base import Coord, manhattan
from .maze import Maze, reachable_from
from .rng import SplitMix64

logger = logging.getLogger(__name__)


def place_goal(
    origin: Coord,
    maze: Maze,
    min_distance: int,
    rng: SplitMix64,
) -> Optional[Coord]:
    """Pick a reachable goal cell at least ``min_distance`` away from ``origin``.

    The distance filter is Manhattan distance on the grid, not path length.
    When no cell is far enough the constraint is dropped, and ``None`` is
    returned only when nothing besides ``origin`` is reachable. Candidates
    are drawn in row-major order so seeded placement is reproducible.
    """

    reachable = reachable_from(origin, maze)
    candidates = sorted(coord for coord in reachable.visited if coord != origin)
    if not candidates:
        logger.debug("No goal candidates reachable from %s", origin)
        return None

    far = [coord for coord in candidates if manhattan(coord, origin) >= min_distance]
    if far:
        goal = rng.choice(far)
        logger.debug("Placed goal at %s (%d of %d candidates far enough)", goal, len(far), len(candidates))
        return goal

    logger.warning(
        "No reachable cell is %d cells from %s; placing goal without distance constraint",
        min_distance,
        origin,
    )
    return rng.choice(candidates)


__all__ = ["place_goal"]
