# flightrig/rig/core.py
"""
The orchestrator of the scroll-driven flight. Holds the FlightState, runs the
progress, orientation and motion systems once per frame and publishes the
vehicle and camera transforms for the renderer.
"""
import logging
import math
from typing import Any, Dict, Iterable, Optional, Tuple

import numpy as np

from ..path.core import PathCurve
from .config import TuningConfig
from .constants import RigConstants
from .data_models import CameraTransform, FlightState, ObjectTransform, OrientationTargets, RigOutput
from .systems.motion import MotionSmoother
from .systems.orientation import OrientationSolver
from .systems.progress import sanitize_delta, sanitize_progress, smooth_progress
from .utils.vectors import flight_axes

logger = logging.getLogger(__name__)

class FlightRig:
    def __init__(self, curve: PathCurve, config: Optional[TuningConfig] = None):
        """
        Args:
            curve: Precomputed flight path
            config: Tuning coefficients (shipped defaults if None)
        """
        self.curve = curve
        self.config = config or TuningConfig()
        self.solver = OrientationSolver(self.config)
        self.smoother = MotionSmoother(self.config)

        self.debug_enabled = self.config.debug.enabled
        self.last_telemetry: Optional[Dict[str, Any]] = None
        self.last_raw_progress = 0.0

        self.state = self.initial_state()
        logger.info(f"FlightRig initialized on {curve!r} (look-ahead {self.config.look_ahead} samples).")

    @classmethod
    def from_control_points(cls, control_points: Iterable, config: Optional[TuningConfig] = None) -> "FlightRig":
        """Builds the curve from the configuration's curve settings, then the rig."""
        config = config or TuningConfig()
        curve = PathCurve(
            control_points,
            curve_type=config.curve_type,
            tension=config.curve_tension,
            resolution=config.curve_resolution
        )
        return cls(curve, config)

    def initial_state(self) -> FlightState:
        """State at the start of a session: on the first sample, facing -Z."""
        return FlightState(
            progress=0.0,
            position=self.curve.start,
            last_forward=np.array(RigConstants.INITIAL_FORWARD, dtype=float),
            camera_position=np.array(self.config.camera_initial_position, dtype=float),
            camera_look_at=self.curve.start
        )

    def reset(self) -> None:
        """Discards all motion state, as if the rig had been rebuilt."""
        self.state = self.initial_state()
        self.last_telemetry = None
        self.last_raw_progress = 0.0
        logger.info("FlightRig state reset.")

    def toggle_debug(self) -> bool:
        self.debug_enabled = not self.debug_enabled
        logger.info(f"Flight debug telemetry {'enabled' if self.debug_enabled else 'disabled'}.")
        return self.debug_enabled

    def _sanitize_inputs(self, raw_progress: float, delta_time: float) -> Tuple[float, float]:
        """Clamps raw progress and zeroes unusable deltas, warning about either."""
        dt = sanitize_delta(delta_time)
        if dt != delta_time:
            logger.warning(f"Unusable frame delta {delta_time!r}; smoothing advance skipped for this frame.")

        progress = sanitize_progress(raw_progress)
        if progress != raw_progress:
            logger.warning(f"Raw progress {raw_progress!r} outside [0, 1]; clamped to {progress}.")
        return progress, dt

    def _advance(self, state: FlightState, raw_progress: float,
                 delta_time: float) -> Tuple[FlightState, OrientationTargets]:
        raw_progress, dt = self._sanitize_inputs(raw_progress, delta_time)
        cfg = self.config

        # 1. Smooth the scroll input
        progress = smooth_progress(state.progress, raw_progress, dt, cfg.scroll_smoothing)

        # 2. Sample the curve around the animated progress
        cur_point, next_point, future_point, position = self.curve.bracket(progress, cfg.look_ahead)

        # 3. Target attitude
        targets = self.solver.solve(cur_point, next_point, future_point, state.last_forward)
        logger.debug(
            f"Frame {state.frame_count + 1}: progress={progress:.4f} "
            f"bank_target={targets.bank_target:.3f} pitch_target={targets.pitch_target:.3f}"
        )

        # 4. Ease vehicle and camera toward their targets
        new_state = self.smoother.step(state, targets, position, dt)
        new_state.progress = progress
        new_state.frame_count = state.frame_count + 1
        return new_state, targets

    def advance(self, state: FlightState, raw_progress: float, delta_time: float) -> FlightState:
        """
        Deterministic frame function: (previous state, input) -> next state.
        Does not read or modify `self.state`.
        """
        return self._advance(state, raw_progress, delta_time)[0]

    def step(self, raw_progress: float, delta_time: float) -> RigOutput:
        """Runs one rendered frame and returns the transforms to publish."""
        self.state, targets = self._advance(self.state, raw_progress, delta_time)
        self.last_raw_progress = sanitize_progress(raw_progress)

        if self.debug_enabled and self.state.frame_count % self.config.debug.log_interval == 0:
            self._emit_debug_telemetry(targets)

        return self.output()

    @property
    def object_transform(self) -> ObjectTransform:
        return ObjectTransform(position=self.state.position.copy(), orientation=self.state.orientation.as_quat())

    @property
    def camera_transform(self) -> CameraTransform:
        return CameraTransform(position=self.state.camera_position.copy(), look_at=self.state.camera_look_at.copy())

    def output(self) -> RigOutput:
        return RigOutput(
            frame=self.state.frame_count,
            progress=self.state.progress,
            vehicle=self.object_transform,
            camera=self.camera_transform
        )

    def _emit_debug_telemetry(self, targets: OrientationTargets) -> None:
        """Logs one structured record of the current attitude. Observation only."""
        x_axis, y_axis, z_axis = flight_axes(self.state.orientation)
        telemetry = {
            'frame': self.state.frame_count,
            'bank_deg': math.degrees(self.state.bank_angle),
            'pitch_deg': math.degrees(self.state.pitch_angle),
            'yaw_deg': math.degrees(self.state.yaw_angle),
            'position': self.state.position.tolist(),
            'x_axis': x_axis.tolist(),
            'y_axis': y_axis.tolist(),
            'z_axis': z_axis.tolist(),
            'elevation_change': targets.elevation_change,
            'turn_amount': targets.turn_amount,
            'turn_direction': targets.turn_direction,
            'scroll': self.last_raw_progress,
        }
        self.last_telemetry = telemetry

        parts = []
        for key in ('frame', 'bank_deg', 'pitch_deg', 'yaw_deg', 'turn_amount', 'turn_direction', 'elevation_change', 'scroll'):
            value = telemetry[key]
            if isinstance(value, float): parts.append(f"{key.upper()}: {value:7.2f}")
            else: parts.append(f"{key.upper()}: {str(value):>7}")
        pos = telemetry['position']
        parts.append(f"POS: ({pos[0]:.2f}, {pos[1]:.2f}, {pos[2]:.2f})")
        logger.info("FLIGHT DEBUG " + " ".join(parts), extra={'telemetry': telemetry})
