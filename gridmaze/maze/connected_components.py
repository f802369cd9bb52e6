import typing as t

import numpy.typing as npt

from gridmaze.maze import utils
from gridmaze.maze.types import GridCell
from gridmaze.utils.utils import TAXI_NEIGHBORHOOD


class ConnectedComponents:
    """Groups the open cells of a maze array into 4-connected components."""

    def __init__(self, map: npt.NDArray[t.Any]):
        self.components: t.Dict[int, t.Set[GridCell]] = {}
        self.cell_to_component: t.Dict[GridCell, int] = {}
        self.map = map
        self.compute_components(map)

    def compute_components(self, map: npt.NDArray[t.Any]):
        self.components = {}
        self.cell_to_component = {}
        W, H = map.shape
        for x in range(W):
            for y in range(H):
                cell = (x, y)
                if cell in self.cell_to_component:
                    continue

                if utils.is_open(x, y, map):
                    component_idx = len(self.components)
                    assert component_idx not in self.components
                    accessible_cells = self.get_accessible_cells(start=cell, map=map)
                    self.components[component_idx] = accessible_cells
                    for c in accessible_cells:
                        self.cell_to_component[c] = component_idx

    def count_edges(self) -> int:
        """Number of adjacent open-cell pairs, each pair counted once."""
        edges = 0
        for x, y in self.cell_to_component:
            for n in ((x + 1, y), (x, y + 1)):
                if n in self.cell_to_component:
                    edges += 1
        return edges

    def is_tree(self) -> bool:
        return len(self.components) == 1 and (
            self.count_edges() == len(self.cell_to_component) - 1
        )

    def get_accessible_cells(
        self, start: GridCell, map: npt.NDArray[t.Any]
    ) -> t.Set[GridCell]:
        frontier = [start]
        visited: t.Set[GridCell] = set()
        while len(frontier):
            c = frontier.pop()
            visited.add(c)

            for n in self.get_neighbors(c, map):
                if n not in visited:
                    frontier.append(n)

        return visited

    def get_neighbors(
        self, cell: GridCell, map: npt.NDArray[t.Any]
    ) -> t.Iterable[GridCell]:
        (x, y) = cell
        for i, j in TAXI_NEIGHBORHOOD:
            if utils.is_open(x + i, y + j, map):
                yield (x + i, y + j)
