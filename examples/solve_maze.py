import random

from gridmaze.algorithms.graph_search import GridSearch
from gridmaze.maze.maze_grid import MazeGrid


maze = MazeGrid(20, 20)
maze.generate(random.Random(42))
start, goal = (1, 1), (maze.width - 2, maze.height - 2)
maze.set_start_and_end_point(*start, *goal)
path = GridSearch(maze).find_path(*start, *goal)
maze.print_grid(path)
print(f"{len(path)} cells from {start} to {goal}" if path else "No path found")
