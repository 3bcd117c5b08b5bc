from .maze import CellType, Maze
from .maze_generator import EXIT_POLICIES, generate_maze, reachable_distances

__all__ = [
    "CellType",
    "Maze",
    "EXIT_POLICIES",
    "generate_maze",
    "reachable_distances",
]
