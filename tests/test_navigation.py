import threading
import unittest

from mazeguide.base import DIRECTIONS, Direction, Wall
from mazeguide.errors import OutOfBounds
from mazeguide.maze import Maze, generate_maze
from mazeguide.navigation import MoveStatus, Navigator
from mazeguide.rng import SplitMix64


class NavigatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.maze = Maze(2, 3, fill=Wall.ALL)
        self.maze.set_wall((0, 0), Direction.RIGHT, False)
        self.maze.set_wall((0, 1), Direction.UP, False)
        self.maze.set_wall((0, 0), Direction.DOWN, False)
        self.navigator = Navigator(self.maze)

    def test_starts_at_the_given_cell(self) -> None:
        self.assertEqual(self.navigator.current_position(), (0, 0))
        self.assertEqual(Navigator(self.maze, (1, 2)).position, (1, 2))

    def test_open_passage_moves_the_agent(self) -> None:
        outcome = self.navigator.try_move(Direction.RIGHT)
        self.assertTrue(outcome.moved)
        self.assertEqual(outcome.status, MoveStatus.MOVED)
        self.assertEqual(outcome.position, (0, 1))
        self.assertEqual(self.navigator.position, (0, 1))

        outcome = self.navigator.try_move(Direction.UP)
        self.assertEqual(outcome.position, (1, 1))

    def test_wall_blocks_and_leaves_position_unchanged(self) -> None:
        outcome = self.navigator.try_move(Direction.UP)
        self.assertTrue(outcome.blocked)
        self.assertEqual(outcome.position, (0, 0))
        self.assertEqual(self.navigator.position, (0, 0))

    def test_open_entrance_on_the_boundary_still_blocks(self) -> None:
        self.assertFalse(self.maze.has_wall((0, 0), Direction.DOWN))
        self.assertTrue(self.navigator.try_move(Direction.DOWN).blocked)
        self.assertTrue(self.navigator.try_move(Direction.LEFT).blocked)

    def test_stats_count_moves_and_bumps(self) -> None:
        self.navigator.try_move(Direction.RIGHT)
        self.navigator.try_move(Direction.RIGHT)
        self.navigator.try_move(Direction.LEFT)
        self.assertEqual(self.navigator.stats(), {"moves": 2, "blocked": 1})

    def test_reset_moves_agent_and_clears_stats(self) -> None:
        self.navigator.try_move(Direction.RIGHT)
        self.navigator.reset((1, 1))
        self.assertEqual(self.navigator.position, (1, 1))
        self.assertEqual(self.navigator.stats(), {"moves": 0, "blocked": 0})
        with self.assertRaises(OutOfBounds):
            self.navigator.reset((2, 0))

    def test_start_outside_the_grid_is_rejected(self) -> None:
        with self.assertRaises(OutOfBounds):
            Navigator(self.maze, (0, 3))

    def test_outcome_to_dict(self) -> None:
        outcome = self.navigator.try_move(Direction.RIGHT)
        self.assertEqual(
            outcome.to_dict(),
            {"direction": "right", "status": "moved", "position": [0, 1]},
        )


class MoveLegalityTests(unittest.TestCase):
    def test_blocked_iff_can_pass_is_false(self) -> None:
        maze = generate_maze(6, 6, seed=31)
        navigator = Navigator(maze)
        rng = SplitMix64(8)
        for _ in range(400):
            direction = rng.choice(DIRECTIONS)
            before = navigator.position
            passable = maze.can_pass(before, direction)
            outcome = navigator.try_move(direction)
            self.assertEqual(outcome.blocked, not passable)
            if outcome.blocked:
                self.assertEqual(navigator.position, before)
            else:
                self.assertEqual(navigator.position, direction.step(before))

    def test_concurrent_moves_never_tear_position(self) -> None:
        maze = Maze(1, 2)
        navigator = Navigator(maze)
        results = []

        def shuttle() -> None:
            for _ in range(200):
                results.append(navigator.try_move(Direction.RIGHT))
                results.append(navigator.try_move(Direction.LEFT))

        threads = [threading.Thread(target=shuttle) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        moved = [outcome for outcome in results if outcome.moved]
        rights = sum(1 for outcome in moved if outcome.direction is Direction.RIGHT)
        lefts = len(moved) - rights
        expected = (0, 1) if rights > lefts else (0, 0)
        self.assertIn(rights - lefts, (0, 1))
        self.assertEqual(navigator.position, expected)
        self.assertEqual(navigator.stats()["moves"], len(moved))


if __name__ == "__main__":
    unittest.main()
