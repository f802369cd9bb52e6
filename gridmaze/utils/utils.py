import json
import typing as t
from datetime import datetime

from gridmaze.maze.types import GridCell

# Constants
# Axis neighbourhood in up, left, right, down order (y grows downwards)
TAXI_NEIGHBORHOOD = ((0, -1), (-1, 0), (1, 0), (0, 1))


def timestamp_string():
    return datetime.now().strftime("%Y-%m-%d-%Hh%Mm%Ss_%f")


class MazeLog:
    def __init__(self, message: str, step: int, timestamp: str | None = None):
        self.message = message
        self.step = step
        self.timestamp = timestamp if timestamp is not None else timestamp_string()

    def __str__(self):
        return "At step {}: '{}'".format(self.step, self.message)

    def toJSON(self):
        return json.dumps(self, default=lambda o: o.__dict__, sort_keys=True, indent=4)


class MazeLogger(list[MazeLog]):
    def __init__(self, printout: bool = True):
        super(MazeLogger, self).__init__()
        self.printout = printout

    def append(self, log: MazeLog):
        super(MazeLogger, self).append(log)
        if self.printout:
            print(log)

    def messages(self) -> t.List[str]:
        return [log.message for log in self]


def manhattan_distance(a: t.Sequence[int], b: t.Sequence[int], c_cost: int = 1) -> int:
    return c_cost * (abs(b[0] - a[0]) + abs(b[1] - a[1]))


def is_in_matrix(cell: t.Sequence[int], width: int, height: int) -> bool:
    return 0 <= cell[0] < width and 0 <= cell[1] < height


def get_neighbors(
    cell: GridCell, width: int, height: int, neighborhood=TAXI_NEIGHBORHOOD
) -> t.List[GridCell]:
    """In-bounds neighbours of `cell`, in `neighborhood` order."""
    neighbors = []
    for i, j in neighborhood:
        neighbor = cell[0] + i, cell[1] + j
        if is_in_matrix(neighbor, width, height):
            neighbors.append(neighbor)
    return neighbors
