"""Per-frame camera pose updates driven by a set of active controls.

A host application records which controls are held down (keys, buttons)
in a :class:`CameraState` from its input callbacks and calls
:meth:`CameraState.step` once per rendered frame. The set of active
controls is read once under a lock so that a frame never mixes inputs from
two different moments.
"""

import enum
import logging
import threading
from dataclasses import dataclass, field, replace

import numpy as np

from .camera import CameraPose
from .linalg import transform

# Module logger
logger = logging.getLogger(__name__)


class Control(enum.Enum):
    """Camera controls a host can bind to keys.

    Pan and zoom move the camera along its own right, up and viewing axes;
    the turn controls change yaw, pitch and roll.
    """
    PAN_LEFT = 1
    PAN_RIGHT = 2
    PAN_UP = 3
    PAN_DOWN = 4
    ZOOM_IN = 5
    ZOOM_OUT = 6
    YAW_LEFT = 7
    YAW_RIGHT = 8
    PITCH_UP = 9
    PITCH_DOWN = 10
    ROLL_LEFT = 11
    ROLL_RIGHT = 12


# (right, up, forward) movement per control, in camera space
_MOVES = {
    Control.PAN_LEFT: (-1.0, 0.0, 0.0),
    Control.PAN_RIGHT: (1.0, 0.0, 0.0),
    Control.PAN_UP: (0.0, 1.0, 0.0),
    Control.PAN_DOWN: (0.0, -1.0, 0.0),
    Control.ZOOM_IN: (0.0, 0.0, 1.0),
    Control.ZOOM_OUT: (0.0, 0.0, -1.0),
}

# (yaw, pitch, roll) change per control
_TURNS = {
    Control.YAW_LEFT: (1.0, 0.0, 0.0),
    Control.YAW_RIGHT: (-1.0, 0.0, 0.0),
    Control.PITCH_UP: (0.0, 1.0, 0.0),
    Control.PITCH_DOWN: (0.0, -1.0, 0.0),
    Control.ROLL_LEFT: (0.0, 0.0, -1.0),
    Control.ROLL_RIGHT: (0.0, 0.0, 1.0),
}


def apply_controls(pose, active, dt, speed=1.0, turn_rate=45.0):
    """Return the pose after holding ``active`` controls for ``dt`` seconds.

    Opposite controls held together cancel out.

    Parameters
    ----------
    pose : CameraPose
        Current camera pose.
    active : iterable of Control
        Controls held during the frame.
    dt : float
        Frame duration in seconds.
    speed : float, optional, default 1.0
        Movement speed in world units per second.
    turn_rate : float, optional, default 45.0
        Turning speed in degrees per second.

    Returns
    -------
    CameraPose
        New pose; ``pose`` itself is not modified.
    """
    active = frozenset(active)
    if not active:
        return pose

    move = np.zeros(3)
    turn = np.zeros(3)
    for control in active:
        if control in _MOVES:
            move += _MOVES[control]
        else:
            turn += _TURNS[control]

    # the camera looks down its negative z-axis
    local = np.array([move[0], move[1], -move[2], 0.0]) * speed * dt
    delta = transform(pose.model_matrix(), local)[:3]
    yaw, pitch, roll = turn * turn_rate * dt

    return replace(
        pose,
        x=pose.x + float(delta[0]),
        y=pose.y + float(delta[1]),
        z=pose.z + float(delta[2]),
        yaw=pose.yaw + float(yaw),
        pitch=pose.pitch + float(pitch),
        roll=pose.roll + float(roll),
    )


@dataclass
class CameraState:
    """Live camera pose plus the controls currently held by the user.

    Input callbacks call :meth:`press` / :meth:`release`; the render loop
    calls :meth:`step` once per frame and builds the view matrix from the
    returned pose.

    Attributes
    ----------
    pose : CameraPose
        Pose used for the most recent frame.
    speed : float
        Movement speed in world units per second.
    turn_rate : float
        Turning speed in degrees per second.
    """
    pose: CameraPose = field(default_factory=CameraPose)
    speed: float = 1.0
    turn_rate: float = 45.0
    _active: set = field(default_factory=set, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def press(self, control):
        with self._lock:
            self._active.add(control)

    def release(self, control):
        with self._lock:
            self._active.discard(control)

    def snapshot(self):
        """Return the active controls as a frozenset, read atomically."""
        with self._lock:
            return frozenset(self._active)

    def step(self, dt):
        """Advance the pose by one frame of ``dt`` seconds and return it."""
        active = self.snapshot()
        self.pose = apply_controls(self.pose, active, dt, self.speed, self.turn_rate)
        if active:
            logger.debug("Camera pose %s after %s", self.pose, sorted(c.name for c in active))
        return self.pose
