import random
import typing as t

import typer

from gridmaze.data_models import MazeConfigModel, maze_config_from_yaml
from gridmaze.runner import generate_maze, solve_maze
from gridmaze.utils import utils

app = typer.Typer()


@app.command()
def gen_maze(
    width: int = 20,
    height: int = 20,
    seed: t.Annotated[t.Optional[int], typer.Option("--seed")] = None,
    quiet: t.Annotated[bool, typer.Option("--quiet")] = False,
):
    maze = generate_maze(
        width,
        height,
        rng=random.Random(seed),
        logger=utils.MazeLogger(printout=not quiet),
    )
    maze.print_grid()


@app.command()
def solve(
    width: t.Annotated[t.Optional[int], typer.Option("--width")] = None,
    height: t.Annotated[t.Optional[int], typer.Option("--height")] = None,
    seed: t.Annotated[t.Optional[int], typer.Option("--seed")] = None,
    config: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
    quiet: t.Annotated[bool, typer.Option("--quiet")] = False,
):
    """Solves a maze described either by --width/--height/--seed or by a --config file."""
    overrides = {"width": width, "height": height, "random_seed": seed}
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if config is not None:
        if overrides:
            raise typer.BadParameter(
                "--width, --height and --seed cannot be combined with --config",
                param_hint="--config",
            )
        maze_config = maze_config_from_yaml(config)
    else:
        maze_config = MazeConfigModel(**overrides)

    run = solve_maze(maze_config, logger=utils.MazeLogger(printout=not quiet))
    if maze_config.print_maze:
        run.maze.print_grid(run.path)


if __name__ == "__main__":
    app()
