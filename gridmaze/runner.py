import random
import typing as t

from gridmaze.algorithms.graph_search import GridSearch
from gridmaze.data_models import MazeConfigModel
from gridmaze.exceptions import MazeValidationError
from gridmaze.maze.connected_components import ConnectedComponents
from gridmaze.maze.maze_grid import MazeGrid
from gridmaze.maze.types import GridCell, RandomSource
from gridmaze.utils import utils


class MazeRun:
    def __init__(
        self,
        *,
        maze: MazeGrid,
        start: GridCell,
        goal: GridCell,
        path: t.List[GridCell],
        logger: utils.MazeLogger,
    ):
        self.maze = maze
        self.start = start
        self.goal = goal
        self.path = path
        self.logger = logger

    @property
    def path_found(self) -> bool:
        return len(self.path) > 0

    @property
    def path_cost(self) -> int | None:
        if not self.path:
            return None
        return len(self.path) - 1


def generate_maze(
    width: int,
    height: int,
    rng: RandomSource | None = None,
    logger: utils.MazeLogger | None = None,
) -> MazeGrid:
    if logger is None:
        logger = utils.MazeLogger()
    maze = MazeGrid(width, height)
    maze.generate(rng)
    components = ConnectedComponents(maze.grid)
    is_perfect = components.is_tree()
    logger.append(
        utils.MazeLog(
            "Generated {}x{} maze with {} open cells in {} component(s), perfect: {}.".format(
                width,
                height,
                len(components.cell_to_component),
                len(components.components),
                is_perfect,
            ),
            0,
        )
    )
    if not is_perfect:
        raise MazeValidationError(
            "Generated maze is not a single loop-free region of open cells"
        )
    return maze


def solve_maze(
    config: MazeConfigModel,
    logger: utils.MazeLogger | None = None,
    rng: RandomSource | None = None,
) -> MazeRun:
    """Generates a maze, opens both endpoints and searches a path between them."""
    if logger is None:
        logger = utils.MazeLogger()
    if rng is None:
        rng = random.Random(config.random_seed)

    maze = generate_maze(config.width, config.height, rng=rng, logger=logger)

    start, goal = config.get_start(), config.get_goal()
    maze.set_start_and_end_point(start[0], start[1], goal[0], goal[1])
    logger.append(utils.MazeLog(f"Opened start {start} and goal {goal}.", 1))

    path = GridSearch(maze).find_path(start[0], start[1], goal[0], goal[1])
    if path:
        logger.append(
            utils.MazeLog(
                f"Path found with {len(path)} cells (cost {len(path) - 1}).", 2
            )
        )
    else:
        logger.append(utils.MazeLog(f"No path from {start} to {goal}.", 2))

    return MazeRun(maze=maze, start=start, goal=goal, path=path, logger=logger)

