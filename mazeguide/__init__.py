"""Logic core for a grid-maze exploration game."""

__all__ = [
    "Coord",
    "Direction",
    "Wall",
    "MazeError",
    "InvalidDimensions",
    "OutOfBounds",
    "SplitMix64",
    "Maze",
    "MazeGenerator",
    "generate_maze",
    "ReachabilityResult",
    "reachable_from",
    "graph_distance",
    "MoveStatus",
    "MoveOutcome",
    "Navigator",
    "place_goal",
    "Difficulty",
    "GuidanceTiming",
    "SessionConfig",
    "GuidanceSequencer",
    "GuidanceState",
    "ManualScheduler",
    "ThreadingScheduler",
    "EventLog",
    "GameSession",
    "SessionSnapshot",
    "start_session",
]

from .base import Coord, Direction, Wall
from .errors import MazeError, InvalidDimensions, OutOfBounds
from .rng import SplitMix64
from .maze import (
    Maze,
    MazeGenerator,
    generate_maze,
    ReachabilityResult,
    reachable_from,
    graph_distance,
)
from .navigation import MoveStatus, MoveOutcome, Navigator
from .goal import place_goal
from .config import Difficulty, GuidanceTiming, SessionConfig
from .guidance import GuidanceSequencer, GuidanceState, ManualScheduler, ThreadingScheduler
from .events import EventLog
from .session import GameSession, SessionSnapshot, start_session
