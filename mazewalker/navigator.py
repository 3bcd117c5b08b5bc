#!/usr/bin/env python3
#
#   navigator.py
#
#   Move a first-person agent through a maze in continuous space.
#
#   Every check goes through map_to_cell, which rounds a continuous
#   position to the nearest grid cell.  A move is legal when that cell is
#   inside the maze and not a wall.  Legal moves are then nudged so the
#   agent keeps its clearance from the wall faces.
#
import logging
import math

from .config import NavigatorConfig
from .generators.maze import CellType
from .types import Pose

logger = logging.getLogger(__name__)


# Round half away from zero (Python's round() goes to even).
def round_half_away(value):
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


# Snap a coordinate away from a wall face.  The cases are tried in order
# and together cover every fractional part, so each input has exactly one
# output and every output maps to itself.
def step_back_from_wall(pos, clearance):
    floor_pos = math.floor(pos)
    decimal_part = pos - floor_pos

    if 0.5 <= decimal_part <= 0.5 + clearance:
        return floor_pos + 0.5 + clearance
    elif 0.0 <= decimal_part <= clearance:
        return floor_pos + clearance
    elif decimal_part >= 1.0 - clearance:
        return floor_pos + 1.0 - clearance
    elif 0.5 - clearance <= decimal_part < 0.5:
        return floor_pos + 0.5 - clearance
    return pos


# Rotate a local (forward, strafe) velocity into maze coordinates.
def local_to_world(forward, strafe, yaw):
    theta = math.radians(yaw)
    dx = forward * math.cos(theta) + strafe * math.sin(theta)
    dy = forward * math.sin(theta) - strafe * math.cos(theta)
    return dx, dy


def initial_pose(maze, x=None, y=None, config=None):
    """Spawn pose at (x, y), default the maze start, facing an open cell.

    Neighbours are tried in the order (x-1, y), (x, y-1), (x+1, y),
    (x, y+1) so the agent does not start out staring at a wall.
    """
    config = config or NavigatorConfig()
    if x is None or y is None:
        x, y = maze.start

    yaw = 0.0
    for (dx, dy), heading in (((-1, 0), 180.0), ((0, -1), 270.0),
                              ((1, 0), 0.0), ((0, 1), 90.0)):
        if maze.in_bounds(x + dx, y + dy) and not maze.is_wall(x + dx, y + dy):
            yaw = heading
            break
    return Pose(float(x), float(y), config.z_pos, yaw)


class Navigator:
    def __init__(self, maze, pose=None, config=None):
        self.maze = maze
        self.config = config or NavigatorConfig()
        if pose is None:
            pose = initial_pose(maze, config=self.config)
        self.pose = Pose(pose.x, pose.y, self.config.z_pos, pose.yaw)
        self._exit_found = False

    @property
    def exit_found(self):
        return self._exit_found

    ############
    # Discretization:
    def map_to_cell(self, position):
        x, y = position
        return (round_half_away(x), round_half_away(y))

    def is_legal_move(self, position):
        row, col = self.map_to_cell(position)
        if not self.maze.in_bounds(row, col):
            return False
        return self.maze.grid[row, col] != CellType.WALL

    ############
    # Wall clearance:
    # Look both ways along each axis from the uncorrected position and
    # snap that coordinate whenever the offset point lands in a wall.
    def resolve_wall_clearance(self, position):
        distance = self.config.reach_distance
        corrected = list(position)

        for axis in (0, 1):
            for sign in (1.0, -1.0):
                offset = list(position)
                offset[axis] += sign * distance
                if not self.is_legal_move(offset):
                    before = corrected[axis]
                    corrected[axis] = step_back_from_wall(corrected[axis], self.config.clearance)
                    if corrected[axis] != before:
                        logger.debug("Stepped back from wall on axis %d: %.4f -> %.4f",
                                     axis, before, corrected[axis])
        return tuple(corrected)

    ############
    # Exit detection:
    def is_exit(self, position):
        row, col = self.map_to_cell(position)
        if self.maze.in_bounds(row, col) and self.maze.grid[row, col] == CellType.END:
            if not self._exit_found:
                logger.info("Exit found at cell (%d, %d)", row, col)
            self._exit_found = True
            return True
        return False

    def check_exit(self, position=None):
        """Return whether the exit has been reached, testing position first if given.

        The flag never resets once set, whatever position is passed later.
        """
        if position is not None:
            self.is_exit(position)
        return self._exit_found

    ############
    # Per-frame update:
    def tick(self, intent, rotation_delta=0.0):
        yaw = self.pose.yaw + rotation_delta
        dx, dy = local_to_world(intent.forward, intent.strafe, yaw)
        prospective = (self.pose.x + dx, self.pose.y + dy)

        # The step into the exit is not taken or corrected; the flag is
        # all the presentation layer needs.
        if self.is_exit(prospective):
            self.pose = self.pose.with_yaw(yaw)
            return self.pose

        if self.is_legal_move(prospective):
            x, y = self.resolve_wall_clearance(prospective)
        else:
            if dx or dy:
                logger.debug("Rejected move to (%.3f, %.3f)", *prospective)
            x, y = self.pose.x, self.pose.y

        self.pose = Pose(x, y, self.config.z_pos, yaw)
        return self.pose
