"""
A* algorithm over a 4-connected grid of wall/open cells.

Documented using the pseudocode in A* Wikipedia page:
https://en.wikipedia.org/wiki/A_star

Every move costs 1 and the heuristic is the Manhattan distance, which is
consistent on such grids: the first time the goal is popped from the frontier,
its cost is optimal.
"""

import heapq
import typing as t

import numpy as np
import numpy.typing as npt

from gridmaze.maze import utils as maze_utils
from gridmaze.maze.types import GridCell
from gridmaze.utils import utils


class GridLike(t.Protocol):
    width: int
    height: int

    def is_wall(self, x: int, y: int) -> bool: ...


T = t.TypeVar("T")


def reconstruct_path(
    came_from: t.Dict[T, T], end: T, reverse: bool = True
) -> t.List[T]:
    path = [end]
    current = end
    while current in came_from:
        current = came_from[current]
        path.append(current)
    if reverse:
        path.reverse()
    return path


class HeapNode:
    def __init__(self, cost: float, element: GridCell):
        self.cost = cost
        self.element = element

    def __lt__(self, other):
        # Meant for allowing heapq to properly order the heap's elements according to lowest cost
        return self.cost < other.cost


class SearchState:
    """Bookkeeping of a single `GridSearch.find_path` call."""

    def __init__(self, width: int, height: int):
        self.cost_so_far: npt.NDArray[np.float64] = np.full((width, height), np.inf)
        self.came_from: t.Dict[GridCell, GridCell] = {}
        self.on_frontier: npt.NDArray[np.bool_] = np.zeros(
            (width, height), dtype=np.bool_
        )

    def cost(self, cell: GridCell) -> float:
        return float(self.cost_so_far[cell[0]][cell[1]])

    def is_reached(self, cell: GridCell) -> bool:
        return self.cost(cell) != np.inf

    def is_finalized(self, cell: GridCell) -> bool:
        return self.is_reached(cell) and not self.on_frontier[cell[0]][cell[1]]


class GridSearch:
    def __init__(self, grid: GridLike):
        self.grid = grid

    def heuristic(self, a: GridCell, b: GridCell) -> int:
        return utils.manhattan_distance(a, b)

    def find_path(
        self, start_x: int, start_y: int, goal_x: int, goal_y: int
    ) -> t.List[GridCell]:
        """Finds a shortest path between two cells of the grid.

        :return: the cells from start to goal, both included, or an empty list if
            the goal cannot be reached
        :raises OutOfGridError: if start or goal lies outside of the grid
        """
        width, height = self.grid.width, self.grid.height
        maze_utils.check_in_grid(start_x, start_y, width, height)
        maze_utils.check_in_grid(goal_x, goal_y, width, height)

        start, goal = (start_x, start_y), (goal_x, goal_y)
        state = SearchState(width, height)
        open_heap: t.List[HeapNode] = []

        state.cost_so_far[start_x][start_y] = 0
        heapq.heappush(open_heap, HeapNode(self.heuristic(start, goal), start))
        state.on_frontier[start_x][start_y] = True

        while open_heap:
            current = heapq.heappop(open_heap).element
            x, y = current

            # Stale duplicate of a node that was already expanded
            if not state.on_frontier[x][y]:
                continue
            state.on_frontier[x][y] = False

            # Stop when the goal is popped, not when it is first discovered
            if current == goal:
                break

            new_cost = state.cost(current) + 1
            for i, j in utils.TAXI_NEIGHBORHOOD:
                neighbor = x + i, y + j
                if not utils.is_in_matrix(neighbor, width, height):
                    continue
                if self.grid.is_wall(*neighbor) or state.is_finalized(neighbor):
                    continue

                if new_cost < state.cost(neighbor):
                    # This path is the best until now. Record it!
                    state.cost_so_far[neighbor[0]][neighbor[1]] = new_cost
                    state.came_from[neighbor] = current
                    # A resident neighbor gets a duplicate node with the improved key
                    heapq.heappush(
                        open_heap,
                        HeapNode(new_cost + self.heuristic(neighbor, goal), neighbor),
                    )
                    state.on_frontier[neighbor[0]][neighbor[1]] = True

        if not state.is_reached(goal):
            return []
        return reconstruct_path(state.came_from, goal)
