#!/usr/bin/env python3
#
#   types.py
#
#   Values passed between the input mapper, the navigator and whatever
#   window or script drives them.
#
from dataclasses import dataclass, replace


######################################################################
#
#   Pose
#
#   x runs along grid rows and y along grid columns, so the agent
#   standing at (x, y) = (i, j) is in the middle of cell (i, j).  Yaw is
#   in degrees, 0 facing +x, positive turning towards +y.
#
@dataclass(frozen=True)
class Pose:
    x: float
    y: float
    z: float = 0.0
    yaw: float = 0.0

    # Return a tuple of coordinates, used to look up the cell.
    def coordinates(self):
        return (self.x, self.y)

    def with_yaw(self, yaw):
        return replace(self, yaw=yaw)


######################################################################
#
#   Motion Intent
#
#   forward is positive ahead, strafe positive to the right, each one of
#   +step, -step or 0.  yaw_delta collects rotate presses until the next
#   tick consumes it.
#
@dataclass
class MotionIntent:
    forward: float = 0.0
    strafe: float = 0.0
    yaw_delta: float = 0.0

    @property
    def is_still(self):
        return self.forward == 0.0 and self.strafe == 0.0


######################################################################
#
#   Events
#
#   A window layer only has to translate its own events into these.
#
@dataclass(frozen=True)
class KeyDown:
    key: str


@dataclass(frozen=True)
class KeyUp:
    key: str


# One frame: apply whatever keys are held.
@dataclass(frozen=True)
class Tick:
    pass
