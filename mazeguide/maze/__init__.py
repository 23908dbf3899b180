"""Maze model, generation and reachability analysis."""

__all__ = [
    "Maze",
    "MazeGenerator",
    "generate_maze",
    "ReachabilityResult",
    "reachable_from",
    "graph_distance",
]

from .model import Maze
from .generator import MazeGenerator, generate_maze
from .reachability import ReachabilityResult, reachable_from, graph_distance
