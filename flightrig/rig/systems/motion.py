# flightrig/rig/systems/motion.py
"""
Eases the stored vehicle and camera state toward the solver's targets.

Angle, rotation and position factors are applied once per frame and are not
scaled by the frame delta, so their feel depends on the frame rate. The
camera trail is scaled by the delta and is frame-rate independent.
"""
import numpy as np

from ..config import TuningConfig
from ..data_models import FlightState, OrientationTargets
from ..utils.vectors import axis_rotation, lerp, normalized_quat, slerp
from .progress import sanitize_delta

class MotionSmoother:
    """Advances a FlightState one frame toward its targets"""

    def __init__(self, config: TuningConfig):
        self.config = config
        self.world_up = np.array(config.world_up, dtype=float)
        self.world_up /= np.linalg.norm(self.world_up)
        self.camera_offset = np.array(config.camera_offset, dtype=float)

    def compose_rotation(self, targets: OrientationTargets, bank: float, pitch: float, yaw: float):
        """Base look rotation, then bank about forward, then pitch about right (then yaw if enabled)."""
        rotation = (targets.base_rotation
                    * axis_rotation(targets.forward, bank)
                    * axis_rotation(targets.right, pitch))
        if self.config.include_yaw_in_rotation:
            rotation = rotation * axis_rotation(self.world_up, yaw)
        return normalized_quat(rotation)

    def step(self, state: FlightState, targets: OrientationTargets, target_position: np.ndarray,
             delta_time: float) -> FlightState:
        """
        Returns the next state; `state` itself is left untouched.

        Args:
            state: State from the previous frame
            targets: Raw attitude targets for this frame
            target_position: Interpolated curve position for this frame
            delta_time: Seconds since the previous frame
        """
        cfg = self.config
        new_state = state.copy()

        new_state.bank_angle = lerp(state.bank_angle, targets.bank_target, cfg.bank_lerp)
        new_state.pitch_angle = lerp(state.pitch_angle, targets.pitch_target, cfg.pitch_lerp)
        new_state.yaw_angle = lerp(state.yaw_angle, targets.yaw_target, cfg.yaw_lerp)

        target_rotation = self.compose_rotation(
            targets, new_state.bank_angle, new_state.pitch_angle, new_state.yaw_angle
        )
        new_state.orientation = normalized_quat(slerp(state.orientation, target_rotation, cfg.rotation_lerp))

        target_position = np.asarray(target_position, dtype=float)
        new_state.position = lerp(state.position, target_position, cfg.position_lerp)

        # Camera trails the curve position, offset in the vehicle's frame
        camera_target = target_position + new_state.orientation.apply(self.camera_offset)
        camera_factor = min(1.0, sanitize_delta(delta_time) * cfg.camera_smoothing)
        new_state.camera_position = lerp(state.camera_position, camera_target, camera_factor)
        new_state.camera_look_at = lerp(state.camera_look_at, target_position, camera_factor)

        new_state.last_forward = targets.forward.copy()
        return new_state
