# flightrig/rig/systems/orientation.py
"""
Target attitude from the local shape of the path.

Bank anticipates the upcoming turn using a look-ahead sample, pitch follows
the local slope and yaw reflects how fast the heading is changing. Targets
are raw; MotionSmoother is responsible for easing toward them.
"""
import math

import numpy as np

from ..config import TuningConfig
from ..data_models import OrientationTargets
from ..utils.vectors import clamp, horizontal, look_rotation, safe_normalize

_DEFAULT_RIGHT = np.array([1.0, 0.0, 0.0])

class OrientationSolver:
    """Computes bank, pitch and yaw targets and the base look rotation."""

    def __init__(self, config: TuningConfig):
        self.config = config
        self.world_up = safe_normalize(np.array(config.world_up, dtype=float))

    def solve(self, cur_point: np.ndarray, next_point: np.ndarray, future_point: np.ndarray,
              last_forward: np.ndarray) -> OrientationTargets:
        cfg = self.config
        up_axis = self.world_up
        cur_point, next_point, future_point, last_forward = (
            np.asarray(v, dtype=float) for v in (cur_point, next_point, future_point, last_forward)
        )

        # Coincident samples keep the previous heading
        forward = safe_normalize(next_point - cur_point, last_forward)

        right = safe_normalize(np.cross(forward, up_axis))
        if right is None:
            right = safe_normalize(np.cross(last_forward, up_axis), _DEFAULT_RIGHT)
        up = safe_normalize(np.cross(right, forward), up_axis)

        # --- BANK ---
        future_dir = safe_normalize(future_point - cur_point, forward)
        horizontal_future = safe_normalize(horizontal(future_dir, up_axis))
        if horizontal_future is None:
            turn_amount = 0.0
        else:
            turn_amount = math.acos(clamp(float(np.dot(forward, horizontal_future)), -1.0, 1.0))
        turn_direction = float(np.sign(np.dot(right, future_dir)))

        bank_target = -turn_direction * turn_amount * cfg.max_bank_angle * cfg.bank_gain
        if cfg.clamp_bank_angle:
            bank_target = clamp(bank_target, -cfg.max_bank_angle, cfg.max_bank_angle)

        # --- PITCH ---
        elevation_change = float(np.dot(next_point - cur_point, up_axis))
        pitch_target = clamp(elevation_change * cfg.elevation_influence, -cfg.max_pitch_angle, cfg.max_pitch_angle)

        # --- YAW ---
        direction_change = forward - last_forward
        yaw_target = (float(np.linalg.norm(horizontal(direction_change, up_axis)))
                      * float(np.sign(direction_change[0])) * cfg.yaw_gain)

        return OrientationTargets(
            forward=forward,
            right=right,
            up=up,
            bank_target=bank_target,
            pitch_target=pitch_target,
            yaw_target=yaw_target,
            base_rotation=look_rotation(forward, up_axis),
            turn_amount=turn_amount,
            turn_direction=turn_direction,
            elevation_change=elevation_change
        )
