import typing as t

WALL = 1
FLOOR = 0

GridCell = t.Tuple[int, int]
GridCellType = t.Literal[0, 1]


class Cell(t.NamedTuple):
    x: int
    y: int
    is_wall: bool
    visited: bool


class RandomSource(t.Protocol):
    """Anything that draws uniform integers in [0, stop), e.g. `random.Random`."""

    def randrange(self, stop: int) -> int: ...
