# flightrig/rig/data_models.py
"""
State and output structures exchanged between the rig's systems.
"""
from dataclasses import dataclass, field

import numpy as np
from scipy.spatial.transform import Rotation

def _zeros() -> np.ndarray:
    return np.zeros(3)

@dataclass
class FlightState:
    """
    Everything the rig carries from one frame to the next.
    Owned by a single FlightRig; replaced once per rendered frame.
    """
    progress: float = 0.0                  # Animated progress in [0, 1]
    position: np.ndarray = field(default_factory=_zeros)
    orientation: Rotation = field(default_factory=Rotation.identity)
    bank_angle: float = 0.0                # rad, positive = roll toward the left wing
    pitch_angle: float = 0.0               # rad
    yaw_angle: float = 0.0                 # rad
    last_forward: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, -1.0]))
    camera_position: np.ndarray = field(default_factory=_zeros)
    camera_look_at: np.ndarray = field(default_factory=_zeros)
    frame_count: int = 0

    def copy(self) -> "FlightState":
        return FlightState(
            progress=self.progress,
            position=self.position.copy(),
            orientation=Rotation.from_quat(self.orientation.as_quat()),
            bank_angle=self.bank_angle,
            pitch_angle=self.pitch_angle,
            yaw_angle=self.yaw_angle,
            last_forward=self.last_forward.copy(),
            camera_position=self.camera_position.copy(),
            camera_look_at=self.camera_look_at.copy(),
            frame_count=self.frame_count
        )

@dataclass
class OrientationTargets:
    """Raw (unsmoothed) attitude targets for one frame."""
    forward: np.ndarray
    right: np.ndarray
    up: np.ndarray
    bank_target: float
    pitch_target: float
    yaw_target: float
    base_rotation: Rotation
    # Diagnostics for the debug surface
    turn_amount: float = 0.0
    turn_direction: float = 0.0
    elevation_change: float = 0.0

@dataclass
class ObjectTransform:
    """Placement of the animated vehicle."""
    position: np.ndarray
    orientation: np.ndarray  # Unit quaternion, scalar-last (x, y, z, w)

@dataclass
class CameraTransform:
    """Placement of the trailing camera."""
    position: np.ndarray
    look_at: np.ndarray

@dataclass
class RigOutput:
    """What the rig publishes to the renderer each frame."""
    frame: int
    progress: float
    vehicle: ObjectTransform
    camera: CameraTransform
