#!/usr/bin/env python3
#
#   config.py
#
#   Tunable constants for maze generation and first-person navigation.
#
from dataclasses import dataclass


######################################################################
#
#   Parameters
#
#   Maze size is clamped to [MIN_MAZE_SIZE, MAX_MAZE_SIZE] and forced odd,
#   so the largest maze actually built is MAX_MAZE_SIZE + 1.
#
DEFAULT_MAZE_SIZE = 25
MIN_MAZE_SIZE = 5
MAX_MAZE_SIZE = 50

# Seed cell of the generator, also where the agent spawns.
START_X = 1
START_Y = 1

# Agent motion, in grid units (one cell is 1.0 wide) and degrees.
MOVE_STEP = 0.02
ROTATE_ANGLE = 2.0
Z_POS = 0.25

# Minimum distance kept between the agent and a wall face, and the extra
# margin added when checking for walls.
DISTANCE_FROM_WALL = 0.15
REACH_EPSILON = 0.01


def clamp_maze_size(size):
    size = max(MIN_MAZE_SIZE, int(size))
    size = min(size, MAX_MAZE_SIZE)
    if size % 2 == 0:
        size += 1
    return size


@dataclass(frozen=True)
class NavigatorConfig:
    """Motion and collision settings shared by the navigator and the input mapper."""
    move_step: float = MOVE_STEP            # Local velocity magnitude per tick
    rotate_angle: float = ROTATE_ANGLE      # Yaw change per rotate key press (degrees)
    z_pos: float = Z_POS                    # Fixed camera height
    clearance: float = DISTANCE_FROM_WALL   # Min distance from wall faces
    reach_epsilon: float = REACH_EPSILON    # Extra reach of the wall checks

    def __post_init__(self) -> None:
        if self.move_step <= 0:
            raise ValueError(f"move_step must be positive: {self.move_step}")
        if not 0.0 < self.clearance < 0.5:
            raise ValueError(f"clearance must be in (0, 0.5): {self.clearance}")
        if self.reach_epsilon < 0:
            raise ValueError(f"reach_epsilon must not be negative: {self.reach_epsilon}")

    @property
    def reach_distance(self):
        return self.clearance + self.reach_epsilon
