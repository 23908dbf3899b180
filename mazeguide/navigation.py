"""Agent position tracking and wall-checked movement."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .base import Coord, Direction
from .maze import Maze


class MoveStatus(Enum):
    MOVED = "moved"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class MoveOutcome:
    direction: Direction
    status: MoveStatus
    position: Coord

    @property
    def moved(self) -> bool:
        return self.status is MoveStatus.MOVED

    @property
    def blocked(self) -> bool:
        return self.status is MoveStatus.BLOCKED

    def to_dict(self) -> dict:
        return {
            "direction": self.direction.value,
            "status": self.status.value,
            "position": list(self.position),
        }


class Navigator:
    """Owns the agent's cell and applies one cardinal step at a time."""

    def __init__(self, maze: Maze, start: Coord = (0, 0)) -> None:
        maze.walls_at(start)
        self._maze = maze
        self._position = start
        self._lock = threading.Lock()
        self._moves = 0
        self._blocked = 0

    @property
    def maze(self) -> Maze:
        return self._maze

    @property
    def position(self) -> Coord:
        return self._position

    def current_position(self) -> Coord:
        return self._position

    def try_move(self, direction: Direction) -> MoveOutcome:
        with self._lock:
            current = self._position
            if not self._maze.can_pass(current, direction):
                self._blocked += 1
                return MoveOutcome(direction, MoveStatus.BLOCKED, current)
            self._position = direction.step(current)
            self._moves += 1
            return MoveOutcome(direction, MoveStatus.MOVED, self._position)

    def reset(self, position: Coord) -> None:
        self._maze.walls_at(position)
        with self._lock:
            self._position = position
            self._moves = 0
            self._blocked = 0

    def stats(self) -> Dict[str, int]:
        return {"moves": self._moves, "blocked": self._blocked}


__all__ = ["MoveStatus", "MoveOutcome", "Navigator"]
