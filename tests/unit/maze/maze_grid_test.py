import random

import numpy as np
import pytest

from gridmaze.exceptions import (
    InvalidDimensionsError,
    MazeAlreadyGeneratedError,
    OutOfGridError,
)
from gridmaze.maze.connected_components import ConnectedComponents
from gridmaze.maze.maze_grid import MazeGrid
from gridmaze.maze.types import Cell


class RecordingRandom(random.Random):
    def __init__(self, seed: int):
        super().__init__(seed)
        self.stops = []

    def randrange(self, stop, *args, **kwargs):
        self.stops.append(stop)
        return super().randrange(stop)


class Test:
    def test_new_grid_is_all_walls(self):
        maze = MazeGrid(3, 2)
        assert maze.width == 3
        assert maze.height == 2
        assert all(maze.is_wall(x, y) for x in range(3) for y in range(2))
        assert maze.get_cell(2, 1) == Cell(x=2, y=1, is_wall=True, visited=False)
        assert maze.open_cells() == set()

    @pytest.mark.parametrize(
        "width,height",
        [
            (0, 1),
            (1, 0),
            (-3, 4),
            (0, 0),
            (2.5, 3),
            (3, "4"),
            (None, 2),
            (True, 2),
        ],
    )
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(InvalidDimensionsError):
            MazeGrid(width, height)
        with pytest.raises(ValueError):
            MazeGrid(width, height)

    def test_numpy_integer_dimensions(self):
        maze = MazeGrid(np.int64(3), np.int32(2))
        assert maze.grid.shape == (3, 2)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2), (5, 5)])
    def test_out_of_range_queries(self, x, y):
        maze = MazeGrid(3, 2)
        with pytest.raises(OutOfGridError):
            maze.is_wall(x, y)
        with pytest.raises(IndexError):
            maze.get_cell(x, y)
        with pytest.raises(OutOfGridError):
            maze.set_start_and_end_point(0, 0, x, y)

    def test_generated_mazes_are_trees(self):
        for seed in range(20):
            for width, height in [(1, 1), (1, 7), (2, 2), (5, 5), (8, 3), (12, 9)]:
                maze = MazeGrid(width, height)
                maze.generate(random.Random(seed))
                assert not maze.is_wall(0, 0)
                cc = ConnectedComponents(maze.grid)
                assert len(cc.components) == 1
                assert (0, 0) in cc.cell_to_component
                assert cc.count_edges() == len(maze.open_cells()) - 1

    def test_visited_matches_open_cells(self):
        maze = MazeGrid(7, 6)
        maze.generate(random.Random(3))
        for x in range(7):
            for y in range(6):
                cell = maze.get_cell(x, y)
                assert cell.visited == (not cell.is_wall)

    def test_random_draws_stay_in_range(self):
        rng = RecordingRandom(11)
        maze = MazeGrid(10, 10)
        maze.generate(rng)
        assert len(rng.stops) > 0
        assert all(stop >= 1 for stop in rng.stops)

    def test_always_zero_snapshot(self, always_zero_rng):
        maze = MazeGrid(4, 3)
        maze.generate(always_zero_rng)
        assert maze.to_rows() == [
            "....",
            ".##.",
            "...#",
        ]

    def test_always_zero_is_reproducible(self, always_zero_rng):
        a = MazeGrid(9, 7)
        a.generate(always_zero_rng)
        b = MazeGrid(9, 7)
        b.generate(always_zero_rng)
        assert a.to_rows() == b.to_rows()

    def test_seeded_generation_is_reproducible(self):
        a = MazeGrid(15, 11)
        a.generate(random.Random(1234))
        b = MazeGrid(15, 11)
        b.generate(random.Random(1234))
        assert np.array_equal(a.grid, b.grid)

    def test_single_cell(self):
        maze = MazeGrid(1, 1)
        maze.generate(random.Random(0))
        assert maze.open_cells() == {(0, 0)}

    def test_corridor_is_fully_open(self, always_zero_rng):
        maze = MazeGrid(1, 5)
        maze.generate(always_zero_rng)
        assert maze.to_rows() == ["."] * 5

    def test_generate_twice_raises(self):
        maze = MazeGrid(4, 4)
        maze.generate(random.Random(0))
        with pytest.raises(MazeAlreadyGeneratedError):
            maze.generate(random.Random(0))

    def test_generate_without_rng(self):
        maze = MazeGrid(6, 6)
        maze.generate()
        assert maze.is_generated
        assert ConnectedComponents(maze.grid).is_tree()

    def test_set_start_and_end_point(self):
        maze = MazeGrid(3, 2)
        maze.set_start_and_end_point(0, 0, 2, 1)
        assert maze.open_cells() == {(0, 0), (2, 1)}
        assert not maze.get_cell(2, 1).visited
        assert maze.is_wall(1, 0)

    def test_queries_do_not_mutate(self):
        maze = MazeGrid(8, 5)
        maze.generate(random.Random(7))
        grid_before = maze.grid.copy()
        visited_before = maze.visited.copy()
        for _ in range(3):
            for x in range(maze.width):
                for y in range(maze.height):
                    maze.is_wall(x, y)
                    maze.get_cell(x, y)
        assert np.array_equal(grid_before, maze.grid)
        assert np.array_equal(visited_before, maze.visited)
        assert (maze.width, maze.height) == (8, 5)

    def test_to_rows_with_path(self, always_zero_rng):
        maze = MazeGrid(4, 3)
        maze.generate(always_zero_rng)
        assert maze.to_rows(path=[(0, 0), (0, 1), (0, 2)]) == [
            "*...",
            "*##.",
            "*..#",
        ]

    def test_print_grid(self, capsys, always_zero_rng):
        maze = MazeGrid(4, 3)
        maze.generate(always_zero_rng)
        maze.print_grid()
        assert capsys.readouterr().out == "....\n.##.\n...#\n"
