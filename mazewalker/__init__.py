"""
mazewalker - procedurally generated perfect mazes and a first-person agent
that walks them in continuous space.

- generators: maze grid model and randomized depth-first generator
- navigator: legal-move checks, wall clearance and exit detection
- controls: key events to motion, and the controller that drives a navigator
"""

from .config import NavigatorConfig, clamp_maze_size
from .controls import EventHandler, InputMapper, KeyMap, MazeController
from .generators import CellType, Maze, generate_maze
from .navigator import Navigator, initial_pose
from .types import KeyDown, KeyUp, MotionIntent, Pose, Tick

__all__ = [
    "NavigatorConfig",
    "clamp_maze_size",
    "EventHandler",
    "InputMapper",
    "KeyMap",
    "MazeController",
    "CellType",
    "Maze",
    "generate_maze",
    "Navigator",
    "initial_pose",
    "KeyDown",
    "KeyUp",
    "MotionIntent",
    "Pose",
    "Tick",
]
