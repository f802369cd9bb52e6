import typing as t

import yaml
from pydantic import BaseModel, Field, model_validator
from typing_extensions import Self

GridCellModel = t.Tuple[int, int]


class MazeConfigModel(BaseModel):
    width: int = Field(default=20, ge=1)
    height: int = Field(default=20, ge=1)
    start: GridCellModel | None = None
    goal: GridCellModel | None = None
    random_seed: int | None = None
    print_maze: bool = True

    @model_validator(mode="after")
    def check_endpoints(self) -> Self:
        for name, cell in (("start", self.start), ("goal", self.goal)):
            if cell is None:
                continue
            x, y = cell
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(
                    f"{name} {cell} is outside of the {self.width}x{self.height} maze"
                )
        return self

    def get_start(self) -> GridCellModel:
        if self.start is not None:
            return self.start
        return (min(1, self.width - 1), min(1, self.height - 1))

    def get_goal(self) -> GridCellModel:
        if self.goal is not None:
            return self.goal
        return (max(self.width - 2, 0), max(self.height - 2, 0))


def maze_config_from_yaml(file_path: str) -> MazeConfigModel:
    with open(file_path, "r") as stream:
        config = yaml.safe_load(stream)
    return MazeConfigModel(**(config or {}))
