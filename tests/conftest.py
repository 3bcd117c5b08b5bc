"""Shared fixtures"""

import pytest

from mazewalker.config import NavigatorConfig
from mazewalker.generators.maze import Maze


# Same layout the generator can produce for size 5 from seed (1, 1).
HOOK_MAZE = [
    "#####",
    "#S..#",
    "###.#",
    "#...#",
    "###D#",
]


@pytest.fixture
def hook_maze():
    """5x5 hand-built maze: start (1, 1), exit (4, 3)"""
    return Maze.from_rows(HOOK_MAZE)


@pytest.fixture
def config():
    return NavigatorConfig()
