#!/usr/bin/env python3
#
#   maze_generator.py
#
#   Randomized depth-first carving of a perfect maze on a square grid.
#
#   Carving moves two cells at a time so every other row and column stays a
#   wall between corridors.  The seed cell becomes START and the exit is
#   placed by an exit placement policy.
#
import logging
from collections import deque

import numpy as np

from ..config import MIN_MAZE_SIZE, START_X, START_Y
from .maze import CellType, Maze

logger = logging.getLogger(__name__)

DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def is_valid_position(grid, x, y):
    size = grid.shape[0]
    return 0 <= x < size and 0 <= y < size and grid[x, y] == CellType.WALL


# Count the PATH cells around (x, y).  A target with three or more is
# refused so that carving into it cannot close a loop.
def has_three_paths(grid, x, y):
    size = grid.shape[0]
    paths = 0
    if x > 0 and grid[x - 1, y] == CellType.PATH:
        paths += 1
    if x < size - 1 and grid[x + 1, y] == CellType.PATH:
        paths += 1
    if y > 0 and grid[x, y - 1] == CellType.PATH:
        paths += 1
    if y < size - 1 and grid[x, y + 1] == CellType.PATH:
        paths += 1
    return paths >= 3


def carve_maze(grid, start_x, start_y, rng):
    """Carve corridors into an all-WALL grid, in place.

    Same visiting order as the recursive backtracker: on entering a cell the
    four directions are shuffled, then each is tried in turn once the
    previous branch has been fully explored.  Each stack frame is
    [x, y, shuffled direction order, index of the next direction to try].
    """
    grid[start_x, start_y] = CellType.PATH
    stack = [[start_x, start_y, rng.permutation(len(DIRECTIONS)), 0]]
    carved = 1

    while stack:
        frame = stack[-1]
        x, y, order, i = frame
        if i == len(order):
            stack.pop()
            continue
        frame[3] += 1

        dx, dy = DIRECTIONS[order[i]]
        new_x, new_y = x + 2 * dx, y + 2 * dy
        if is_valid_position(grid, new_x, new_y) and not has_three_paths(grid, new_x, new_y):
            grid[x + dx, y + dy] = CellType.PATH
            grid[new_x, new_y] = CellType.PATH
            carved += 1
            stack.append([new_x, new_y, rng.permutation(len(DIRECTIONS)), 0])

    return carved


# Breadth-first search over non-wall cells.  Returns an array of step counts
# from start, -1 where the cell cannot be reached.
def reachable_distances(grid, start):
    size = grid.shape[0]
    distances = np.full(grid.shape, -1, dtype=int)
    distances[start] = 0
    queue = deque([tuple(start)])

    while queue:
        x, y = queue.popleft()
        for dx, dy in DIRECTIONS:
            new_x, new_y = x + dx, y + dy
            if 0 <= new_x < size and 0 <= new_y < size and \
                    grid[new_x, new_y] != CellType.WALL and distances[new_x, new_y] < 0:
                distances[new_x, new_y] = distances[x, y] + 1
                queue.append((new_x, new_y))
    return distances


######################################################################
#
#   Exit placement policies
#
#   Each takes the carved grid and the seed cell and returns the exit cell.
#

# Fixed far cell on the last row.  Not derived from the maze, so it may sit
# on the outer wall next to a dead end; it is always adjacent to the last
# row of corridors when the seed is on the odd lattice.
def corner_exit(grid, start):
    size = grid.shape[0]
    return (size - 1, size - (start[1] + 1))


# Reachable cell with the longest walk from the seed.
def farthest_exit(grid, start):
    distances = reachable_distances(grid, start)
    x, y = np.unravel_index(np.argmax(distances), distances.shape)
    return (int(x), int(y))


EXIT_POLICIES = {
    'corner': corner_exit,
    'farthest': farthest_exit,
}


######################################################################
#
#   Generation
#
def generate_maze(size, start_x=START_X, start_y=START_Y, rng=None,
                  exit_policy=corner_exit) -> Maze:
    if size < MIN_MAZE_SIZE or size % 2 == 0:
        raise ValueError(f"maze size must be odd and at least {MIN_MAZE_SIZE}, got {size}")
    if not (0 <= start_x < size and 0 <= start_y < size):
        raise ValueError(f"start ({start_x}, {start_y}) outside {size}x{size} maze")
    if isinstance(exit_policy, str):
        exit_policy = EXIT_POLICIES[exit_policy]

    rng = np.random.default_rng(rng)
    grid = np.full((size, size), CellType.WALL, dtype=np.int8)
    carved = carve_maze(grid, start_x, start_y, rng)

    start = (start_x, start_y)
    end = exit_policy(grid, start)
    if tuple(end) == start:
        raise ValueError(f"exit placed on the start cell {start}")

    grid[start] = CellType.START
    grid[tuple(end)] = CellType.END

    maze = Maze(grid, start, end)
    logger.info("Generated %dx%d maze from %s: %d cells carved, exit at %s",
                size, size, start, carved, maze.end)
    logger.debug("Map of the maze:\n%s", maze.to_text())
    return maze
