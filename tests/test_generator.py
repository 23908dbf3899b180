import sys
import unittest

from mazeguide.base import DIRECTIONS, Direction
from mazeguide.errors import InvalidDimensions
from mazeguide.maze import MazeGenerator, generate_maze, reachable_from
from mazeguide.rng import SplitMix64

SIZES = [(1, 1), (1, 6), (6, 1), (2, 2), (4, 4), (5, 7), (8, 10), (12, 18)]


class MazeGeneratorTests(unittest.TestCase):
    def test_every_cell_is_reachable_from_the_start(self) -> None:
        for rows, cols in SIZES:
            with self.subTest(rows=rows, cols=cols):
                maze = generate_maze(rows, cols, seed=rows * 31 + cols)
                result = reachable_from((0, 0), maze)
                self.assertEqual(len(result.visited), rows * cols)
                self.assertFalse(result.truncated)

    def test_carved_maze_is_a_spanning_tree(self) -> None:
        for rows, cols in SIZES:
            with self.subTest(rows=rows, cols=cols):
                maze = generate_maze(rows, cols, seed=7)
                self.assertEqual(maze.passage_count(), rows * cols - 1)

    def test_walls_stay_mirrored(self) -> None:
        maze = generate_maze(9, 11, seed=123)
        for coord in maze.cells():
            for direction in DIRECTIONS:
                other = maze.neighbor(coord, direction)
                if other is not None:
                    self.assertEqual(
                        maze.has_wall(coord, direction),
                        maze.has_wall(other, direction.opposite),
                    )

    def test_only_entrance_and_exit_are_open_on_the_boundary(self) -> None:
        maze = generate_maze(5, 7, seed=3)
        self.assertEqual(
            maze.boundary_openings(),
            [((0, 0), Direction.DOWN), ((4, 6), Direction.UP)],
        )

    def test_single_cell_maze_opens_both_sides_of_the_only_cell(self) -> None:
        maze = generate_maze(1, 1, seed=1)
        self.assertEqual(
            maze.boundary_openings(),
            [((0, 0), Direction.UP), ((0, 0), Direction.DOWN)],
        )
        self.assertEqual(maze.passage_count(), 0)

    def test_same_seed_builds_identical_mazes(self) -> None:
        first = generate_maze(10, 14, seed=42)
        second = generate_maze(10, 14, seed=42)
        self.assertEqual(first, second)
        self.assertTrue((first.as_array() == second.as_array()).all())

    def test_different_seeds_build_different_mazes(self) -> None:
        self.assertNotEqual(generate_maze(8, 8, seed=42), generate_maze(8, 8, seed=43))

    def test_explicit_rng_takes_precedence_over_seed(self) -> None:
        from_rng = generate_maze(6, 6, SplitMix64(5), seed=999)
        from_seed = generate_maze(6, 6, seed=5)
        self.assertEqual(from_rng, from_seed)

    def test_generation_consumes_one_draw_per_carved_step(self) -> None:
        rng = SplitMix64(21)
        MazeGenerator(4, 4, rng=rng).generate()
        replay = SplitMix64(21)
        for _ in range(15):
            replay.next_u64()
        self.assertEqual(rng.next_u64(), replay.next_u64())

    def test_large_grids_do_not_recurse(self) -> None:
        rows, cols = 80, 80
        self.assertLess(sys.getrecursionlimit(), rows * cols)
        maze = generate_maze(rows, cols, seed=2)
        self.assertEqual(maze.passage_count(), rows * cols - 1)

    def test_custom_start_moves_entrance_and_exit(self) -> None:
        generator = MazeGenerator(4, 5, seed=8, start=(0, 4))
        self.assertEqual(generator.end, (3, 0))
        maze = generator.generate()
        self.assertEqual(
            maze.boundary_openings(),
            [((0, 4), Direction.DOWN), ((3, 0), Direction.UP)],
        )

    def test_rejects_invalid_dimensions(self) -> None:
        with self.assertRaises(InvalidDimensions):
            generate_maze(0, 4, seed=1)
        with self.assertRaises(InvalidDimensions):
            MazeGenerator(3, -2)


if __name__ == "__main__":
    unittest.main()
