"""Game session facade: the single entry point the presentation layer talks to."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .base import Coord, Direction
from .config import Difficulty, SessionConfig
from .events import EventLog, EventSink, GoalCollected, Moved, discard
from .goal import place_goal
from .guidance import AbstractScheduler, GuidanceSequencer, ManualScheduler, ThreadingScheduler
from .maze import Maze, generate_maze, graph_distance
from .navigation import MoveOutcome, Navigator
from .rng import SplitMix64

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    maze: Maze
    start: Coord
    goal: Optional[Coord]
    seed: int
    reproducible: bool

    def to_dict(self) -> dict:
        return {
            "maze": self.maze.to_dict(),
            "start": list(self.start),
            "goal": list(self.goal) if self.goal is not None else None,
            "seed": self.seed,
            "reproducible": self.reproducible,
        }


class GameSession:
    """Own one maze, one agent and one guidance sequencer.

    The maze is generated and the goal placed before the constructor returns,
    so moves can never observe a partially built maze. Events go to ``sink``;
    the session never holds a reference to whoever renders them.
    """

    def __init__(
        self,
        config: SessionConfig,
        *,
        scheduler: Optional[AbstractScheduler] = None,
        sink: EventSink = discard,
    ) -> None:
        self._sink = sink
        self._scheduler = scheduler if scheduler is not None else ThreadingScheduler()
        self.sequencer = GuidanceSequencer(self._scheduler, self._guidance_distance, sink, config.timing)
        self._build(config)

    def _build(self, config: SessionConfig) -> None:
        rng = SplitMix64(config.seed)
        maze = generate_maze(config.rows, config.cols, rng, start=config.start)
        goal = place_goal(config.start, maze, config.goal_distance, rng)
        self.config = config
        self.sequencer.timing = config.timing
        self._rng = rng
        self._maze = maze
        self._navigator = Navigator(maze, config.start)
        self._goal = goal
        logger.debug(
            "Started %dx%d session (seed=%d, goal=%s)",
            config.rows,
            config.cols,
            rng.initial_seed,
            goal,
        )

    @property
    def maze(self) -> Maze:
        return self._maze

    @property
    def navigator(self) -> Navigator:
        return self._navigator

    @property
    def position(self) -> Coord:
        return self._navigator.position

    @property
    def goal(self) -> Optional[Coord]:
        return self._goal

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            maze=self._maze,
            start=self.config.start,
            goal=self._goal,
            seed=self._rng.initial_seed,
            reproducible=self._rng.seeded,
        )

    def request_move(self, direction: Direction) -> MoveOutcome:
        outcome = self._navigator.try_move(direction)
        self._sink(Moved(outcome))
        if outcome.moved and self._goal is not None and outcome.position == self._goal:
            self._goal = None
            self._sink(GoalCollected(outcome.position))
        return outcome

    def activate_guidance(self) -> bool:
        return self.sequencer.activate()

    def deactivate_guidance(self) -> bool:
        return self.sequencer.deactivate()

    def new_maze(self, config: Optional[SessionConfig] = None) -> SessionSnapshot:
        """Replace the maze, agent and goal wholesale, cancelling any guidance."""

        self.sequencer.deactivate()
        self._build(config if config is not None else self.config)
        return self.snapshot()

    def _guidance_distance(self) -> int:
        goal = self._goal
        if goal is None:
            return 0
        distance = graph_distance(self._navigator.position, goal, self._maze)
        return distance if distance is not None else 0


def start_session(
    rows: int,
    cols: int,
    seed: Optional[int] = None,
    *,
    scheduler: Optional[AbstractScheduler] = None,
    sink: EventSink = discard,
    **options,
) -> GameSession:
    """Generate a maze, place the agent at the start and place a goal."""

    config = SessionConfig(rows=rows, cols=cols, seed=seed, **options)
    return GameSession(config, scheduler=scheduler, sink=sink)


__all__ = ["GameSession", "SessionSnapshot", "start_session", "main"]


def _parse_moves(values: Sequence[str]) -> List[Direction]:
    names = {direction.value for direction in Direction}
    moves: List[Direction] = []
    for value in values:
        if "," in value:
            tokens = value.split(",")
        elif value.strip().lower() in names:
            tokens = [value]
        else:
            tokens = list(value)
        moves.extend(Direction.parse(token) for token in tokens if token.strip())
    return moves


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a seeded maze session from the command line")
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        default="normal",
        help="Preset grid size used when --rows/--cols are not given",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--min-goal-distance", type=int, default=None)
    parser.add_argument(
        "--moves",
        nargs="*",
        default=[],
        help="Moves to apply, e.g. 'uurd' or 'up,right'",
    )
    parser.add_argument("--guide", action="store_true", help="Run one full guidance sequence at the end")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    preset = Difficulty[args.difficulty.upper()]
    config = SessionConfig(
        rows=args.rows if args.rows is not None else preset.rows,
        cols=args.cols if args.cols is not None else preset.cols,
        seed=args.seed,
        min_goal_distance=args.min_goal_distance,
    )
    log = EventLog()
    scheduler = ManualScheduler()
    session = GameSession(config, scheduler=scheduler, sink=log)
    report = {"config": config.to_dict(), "session": session.snapshot().to_dict()}

    for direction in _parse_moves(args.moves):
        session.request_move(direction)
    if args.guide:
        session.activate_guidance()
        scheduler.run_until_idle()

    report["position"] = list(session.position)
    report["stats"] = session.navigator.stats()
    report["events"] = [event.to_dict() for event in log.events]
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()

