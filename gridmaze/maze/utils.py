import typing as t

import numpy.typing as npt

from gridmaze.exceptions import OutOfGridError
from gridmaze.maze.types import FLOOR


def is_in_map(x: int, y: int, map: npt.NDArray[t.Any]) -> bool:
    W, H = map.shape
    return not (x < 0 or x >= W or y < 0 or y >= H)


def is_open(x: int, y: int, map: npt.NDArray[t.Any]) -> bool:
    if is_in_map(x, y, map):
        return map[x][y] == FLOOR
    return False


def check_in_grid(x: int, y: int, width: int, height: int):
    if not (0 <= x < width and 0 <= y < height):
        raise OutOfGridError((x, y), width, height)
