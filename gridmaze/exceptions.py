import typing as t


class InvalidDimensionsError(ValueError):
    def __init__(self, width: int, height: int):
        super().__init__(
            f"Maze dimensions must be at least 1x1, got {width}x{height}"
        )
        self.width = width
        self.height = height


class OutOfGridError(IndexError):
    def __init__(self, cell: t.Tuple[int, int], width: int, height: int):
        super().__init__(f"Cell {cell} is outside of the {width}x{height} grid")
        self.cell = cell
        self.width = width
        self.height = height


class MazeAlreadyGeneratedError(RuntimeError):
    pass


class MazeValidationError(RuntimeError):
    pass
