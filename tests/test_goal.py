import unittest

from mazeguide.base import Direction, Wall, manhattan
from mazeguide.goal import place_goal
from mazeguide.maze import Maze, generate_maze, reachable_from
from mazeguide.rng import SplitMix64


def hooked_maze() -> Maze:
    """2x2 maze whose only path runs (0,0) -> (1,0) -> (1,1) -> (0,1)."""

    maze = Maze(2, 2, fill=Wall.ALL)
    maze.set_wall((0, 0), Direction.UP, False)
    maze.set_wall((1, 0), Direction.RIGHT, False)
    maze.set_wall((1, 1), Direction.DOWN, False)
    return maze


class PlaceGoalTests(unittest.TestCase):
    def test_primary_path_respects_minimum_manhattan_distance(self) -> None:
        maze = generate_maze(8, 10, seed=12)
        for seed in range(25):
            with self.subTest(seed=seed):
                goal = place_goal((0, 0), maze, 9, SplitMix64(seed))
                self.assertIsNotNone(goal)
                self.assertGreaterEqual(manhattan(goal, (0, 0)), 9)

    def test_goal_is_never_the_origin(self) -> None:
        maze = generate_maze(2, 2, seed=1)
        for seed in range(25):
            self.assertNotEqual(place_goal((0, 0), maze, 0, SplitMix64(seed)), (0, 0))

    def test_filter_uses_manhattan_not_path_length(self) -> None:
        maze = hooked_maze()
        # (0, 1) is three steps away by path but only one on the grid.
        for seed in range(25):
            self.assertEqual(place_goal((0, 0), maze, 2, SplitMix64(seed)), (1, 1))

    def test_falls_back_when_nothing_is_far_enough(self) -> None:
        maze = generate_maze(3, 3, seed=6)
        with self.assertLogs("mazeguide.goal", level="WARNING"):
            goal = place_goal((1, 1), maze, 10, SplitMix64(2))
        self.assertIsNotNone(goal)
        self.assertNotEqual(goal, (1, 1))

    def test_only_reachable_cells_are_candidates(self) -> None:
        maze = Maze(3, 3, fill=Wall.ALL)
        maze.set_wall((0, 0), Direction.RIGHT, False)
        for seed in range(10):
            self.assertEqual(place_goal((0, 0), maze, 4, SplitMix64(seed)), (0, 1))

    def test_single_cell_maze_has_no_placement(self) -> None:
        maze = generate_maze(1, 1, seed=3)
        self.assertIsNone(place_goal((0, 0), maze, 0, SplitMix64(3)))

    def test_isolated_origin_has_no_placement(self) -> None:
        maze = Maze(2, 2, fill=Wall.ALL)
        self.assertIsNone(place_goal((1, 1), maze, 1, SplitMix64(0)))

    def test_same_seed_places_same_goal(self) -> None:
        maze = generate_maze(10, 14, seed=42)
        first = place_goal((0, 0), maze, 12, SplitMix64(5))
        second = place_goal((0, 0), maze, 12, SplitMix64(5))
        self.assertEqual(first, second)
        self.assertIn(first, reachable_from((0, 0), maze))


if __name__ == "__main__":
    unittest.main()
