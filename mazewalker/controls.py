#!/usr/bin/env python3
#
#   controls.py
#
#   Keyboard control of a Navigator.  InputMapper turns key transitions
#   into a MotionIntent, MazeController feeds it to the navigator once per
#   Tick.
#
import logging
from dataclasses import dataclass

from .config import NavigatorConfig
from .types import KeyDown, KeyUp, MotionIntent, Tick

logger = logging.getLogger(__name__)


######################################################################
#
#   Key Bindings
#
@dataclass(frozen=True)
class KeyMap:
    forward: str = 'w'
    back: str = 's'
    left: str = 'a'
    right: str = 'd'
    rotate_left: str = 'q'
    rotate_right: str = 'e'


######################################################################
#
#   Input Mapper
#
#   Forward/back share one velocity component and left/right the other.
#   The latest key-down sets it, a key-up of either key clears it.
#
class InputMapper:
    def __init__(self, config=None, keymap=None):
        self.config = config or NavigatorConfig()
        self.keymap = keymap or KeyMap()
        self.intent = MotionIntent()

    ############
    # Key transitions.  Both return False for keys the mapper ignores.
    def key_down(self, key):
        step = self.config.move_step
        keys = self.keymap
        if key == keys.forward:
            self.intent.forward = step
        elif key == keys.back:
            self.intent.forward = -step
        elif key == keys.left:
            self.intent.strafe = -step
        elif key == keys.right:
            self.intent.strafe = step
        elif key == keys.rotate_left:
            self.intent.yaw_delta += self.config.rotate_angle
        elif key == keys.rotate_right:
            self.intent.yaw_delta -= self.config.rotate_angle
        else:
            return False
        return True

    # Rotate keys act on key-down only.
    def key_up(self, key):
        keys = self.keymap
        if key in (keys.forward, keys.back):
            self.intent.forward = 0.0
        elif key in (keys.left, keys.right):
            self.intent.strafe = 0.0
        else:
            return False
        return True

    ############
    # Return and clear the yaw delta collected since the last call.
    def take_rotation(self):
        yaw_delta = self.intent.yaw_delta
        self.intent.yaw_delta = 0.0
        return yaw_delta

    def reset(self):
        self.intent = MotionIntent()


######################################################################
#
#   Event Handlers
#
#   Anything that consumes KeyDown/KeyUp/Tick events and returns the
#   corrected agent pose.
#
class EventHandler:
    def handle(self, event):
        raise NotImplementedError

    @property
    def exit_found(self):
        raise NotImplementedError


# Key events only update the held keys.  The pose moves on Tick, using
# whatever keys are held at that moment.
class MazeController(EventHandler):
    def __init__(self, navigator, keymap=None):
        self.navigator = navigator
        self.mapper = InputMapper(navigator.config, keymap)

    @property
    def pose(self):
        return self.navigator.pose

    @property
    def exit_found(self):
        return self.navigator.check_exit()

    def handle(self, event):
        if isinstance(event, KeyDown):
            if not self.mapper.key_down(event.key):
                logger.debug("Ignoring key down %r", event.key)
        elif isinstance(event, KeyUp):
            self.mapper.key_up(event.key)
        elif isinstance(event, Tick):
            self.navigator.tick(self.mapper.intent, self.mapper.take_rotation())
        else:
            raise TypeError(f"unsupported event: {event!r}")
        return self.navigator.pose
