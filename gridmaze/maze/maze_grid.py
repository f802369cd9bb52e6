import random
import typing as t

import numpy as np
import numpy.typing as npt

from gridmaze.exceptions import InvalidDimensionsError, MazeAlreadyGeneratedError
from gridmaze.maze import utils
from gridmaze.maze.types import FLOOR, WALL, Cell, GridCell, RandomSource
from gridmaze.utils.utils import get_neighbors

WALL_CHAR = "#"
FLOOR_CHAR = "."
PATH_CHAR = "*"


def is_dimension(value: t.Any) -> bool:
    return (
        isinstance(value, (int, np.integer))
        and not isinstance(value, bool)
        and value >= 1
    )


class MazeGrid:
    """A width x height grid of wall/open cells carved into a perfect maze.

    Cells are addressed as (x, y) with x in [0, width) and y in [0, height),
    y growing downwards. Both backing arrays are indexed `[x][y]`.
    """

    def __init__(self, width: int, height: int):
        if not (is_dimension(width) and is_dimension(height)):
            raise InvalidDimensionsError(width, height)
        self.width = width
        self.height = height
        self.grid: npt.NDArray[np.int8] = np.full((width, height), WALL, dtype=np.int8)
        self.visited: npt.NDArray[np.bool_] = np.zeros((width, height), dtype=np.bool_)
        self.is_generated = False

    def is_wall(self, x: int, y: int) -> bool:
        utils.check_in_grid(x, y, self.width, self.height)
        return bool(self.grid[x][y] == WALL)

    def get_cell(self, x: int, y: int) -> Cell:
        utils.check_in_grid(x, y, self.width, self.height)
        return Cell(
            x=x,
            y=y,
            is_wall=bool(self.grid[x][y] == WALL),
            visited=bool(self.visited[x][y]),
        )

    def open_cells(self) -> t.Set[GridCell]:
        xs, ys = np.where(self.grid == FLOOR)
        return set(zip(xs.tolist(), ys.tolist()))

    def set_start_and_end_point(
        self, start_x: int, start_y: int, end_x: int, end_y: int
    ):
        """Clears the walls at both endpoints. Generation state is left untouched, so
        this does not guarantee that a path exists between them."""
        utils.check_in_grid(start_x, start_y, self.width, self.height)
        utils.check_in_grid(end_x, end_y, self.width, self.height)
        self.grid[start_x][start_y] = FLOOR
        self.grid[end_x][end_y] = FLOOR

    def generate(self, rng: RandomSource | None = None):
        """Carves the maze with randomized Prim's algorithm, rooted at (0, 0).

        A frontier cell is opened only if exactly one of its neighbours is already
        open, and the carve step only extends into a cell whose single open
        neighbour would be the cell just opened. The open cells therefore always
        form a tree under 4-adjacency.

        :param rng: source of uniform integers, anything with `randrange(n)`.
            Defaults to a fresh `random.Random()`.
        :raises MazeAlreadyGeneratedError: if the grid was already generated
        """
        if self.is_generated:
            raise MazeAlreadyGeneratedError("Maze has already been generated")
        if rng is None:
            rng = random.Random()

        frontier: t.List[GridCell] = []
        root = (0, 0)
        self._open(root)
        self._add_walls(root, frontier)

        while frontier:
            current = frontier.pop(rng.randrange(len(frontier)))
            if self.visited[current[0]][current[1]]:
                continue

            # Zero visited neighbours cannot happen, more than one would close a loop
            if self._count_visited_neighbors(current) != 1:
                continue

            self._open(current)
            candidates = [
                n
                for n in self._get_neighbors(current)
                if not self.visited[n[0]][n[1]]
                and self._count_visited_neighbors(n) == 1
            ]
            carved = None
            if candidates:
                carved = candidates[rng.randrange(len(candidates))]
                self._open(carved)

            self._add_walls(current, frontier)
            if carved is not None:
                self._add_walls(carved, frontier)

        self.is_generated = True

    def to_rows(self, path: t.Iterable[GridCell] | None = None) -> t.List[str]:
        path_cells = set(path) if path is not None else set()
        rows = []
        for y in range(self.height):
            row = ""
            for x in range(self.width):
                if (x, y) in path_cells:
                    row += PATH_CHAR
                elif self.grid[x][y] == WALL:
                    row += WALL_CHAR
                else:
                    row += FLOOR_CHAR
            rows.append(row)
        return rows

    def print_grid(self, path: t.Iterable[GridCell] | None = None):
        for row in self.to_rows(path):
            print(row)

    def _open(self, cell: GridCell):
        self.grid[cell[0]][cell[1]] = FLOOR
        self.visited[cell[0]][cell[1]] = True

    def _get_neighbors(self, cell: GridCell) -> t.List[GridCell]:
        return get_neighbors(cell, self.width, self.height)

    def _count_visited_neighbors(self, cell: GridCell) -> int:
        return sum(1 for n in self._get_neighbors(cell) if self.visited[n[0]][n[1]])

    def _add_walls(self, cell: GridCell, frontier: t.List[GridCell]):
        for n in self._get_neighbors(cell):
            if not self.visited[n[0]][n[1]]:
                frontier.append(n)
