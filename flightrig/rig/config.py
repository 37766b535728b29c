# flightrig/rig/config.py
"""
Immutable tuning surface of the flight rig. Every coefficient has a default
taken from RigConstants and can be overridden independently.
"""
import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Tuple

import numpy as np

from ..path.constants import PathConstants
from ..path.data_models import CurveType
from .constants import RigConstants
from .exceptions import ConfigurationError

Vector3 = Tuple[float, float, float]

def _as_vector(name: str, value) -> Vector3:
    try:
        vector = tuple(float(v) for v in value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(name, value, "Expected three numbers") from e
    if len(vector) != 3 or not all(math.isfinite(v) for v in vector):
        raise ConfigurationError(name, value, "Expected three finite numbers")
    return vector

@dataclass(frozen=True)
class DebugConfig:
    """Periodic telemetry emission for offline tuning."""
    enabled: bool = RigConstants.DEBUG['ENABLED']
    log_interval: int = RigConstants.DEBUG['LOG_INTERVAL']

    def __post_init__(self):
        if not isinstance(self.log_interval, int) or self.log_interval <= 0:
            raise ConfigurationError('log_interval', self.log_interval)

@dataclass(frozen=True)
class TuningConfig:
    """All coefficients used by the path, smoothers and orientation solver."""
    # Curve
    curve_resolution: int = RigConstants.ANIMATION['NO_OF_POINTS']
    curve_type: CurveType = PathConstants.DEFAULT_CURVE_TYPE
    curve_tension: float = PathConstants.DEFAULT_TENSION

    # Time-based smoothing rates (1/s)
    scroll_smoothing: float = RigConstants.ANIMATION['SCROLL_SMOOTHING']
    camera_smoothing: float = RigConstants.ANIMATION['MOVEMENT_SMOOTHING']

    # Banking
    max_bank_angle: float = RigConstants.PLANE['MAX_BANK_ANGLE']
    bank_gain: float = RigConstants.PLANE['BANK_GAIN']
    clamp_bank_angle: bool = False

    # Per-frame lerp factors
    bank_lerp: float = RigConstants.PLANE['BANK_LERP']
    pitch_lerp: float = RigConstants.PLANE['PITCH_LERP']
    yaw_lerp: float = RigConstants.PLANE['YAW_LERP']
    rotation_lerp: float = RigConstants.PLANE['ROTATION_LERP']
    position_lerp: float = RigConstants.PLANE['POSITION_LERP']

    # Orientation
    look_ahead: int = RigConstants.PLANE['LOOK_AHEAD']
    max_pitch_angle: float = RigConstants.PLANE['MAX_PITCH_ANGLE']
    elevation_influence: float = RigConstants.PLANE['ELEVATION_INFLUENCE']
    yaw_gain: float = RigConstants.PLANE['YAW_GAIN']
    include_yaw_in_rotation: bool = False

    # Camera and frame
    camera_offset: Vector3 = (0.0, RigConstants.CAMERA['HEIGHT'], RigConstants.CAMERA['DISTANCE'])
    camera_initial_position: Vector3 = RigConstants.CAMERA['INITIAL_POSITION']
    world_up: Vector3 = RigConstants.WORLD_UP

    debug: DebugConfig = field(default_factory=DebugConfig)

    def __post_init__(self):
        # Frozen dataclass: normalise through object.__setattr__
        try:
            object.__setattr__(self, 'curve_type', CurveType(self.curve_type))
        except ValueError as e:
            raise ConfigurationError('curve_type', self.curve_type) from e

        for name in ('camera_offset', 'camera_initial_position', 'world_up'):
            object.__setattr__(self, name, _as_vector(name, getattr(self, name)))
        if math.isclose(sum(v * v for v in self.world_up), 0.0):
            raise ConfigurationError('world_up', self.world_up, "World up must not be zero")

        if isinstance(self.debug, Mapping):
            object.__setattr__(self, 'debug', DebugConfig(**self.debug))

        if not isinstance(self.curve_resolution, (int, np.integer)) or self.curve_resolution <= 1:
            raise ConfigurationError('curve_resolution', self.curve_resolution)
        if not isinstance(self.look_ahead, (int, np.integer)) or self.look_ahead < 1:
            raise ConfigurationError('look_ahead', self.look_ahead)
        object.__setattr__(self, 'curve_resolution', int(self.curve_resolution))
        object.__setattr__(self, 'look_ahead', int(self.look_ahead))

        for name in ('scroll_smoothing', 'camera_smoothing', 'max_bank_angle', 'bank_gain',
                     'max_pitch_angle', 'curve_tension'):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(name, value, "Expected a finite, non-negative value")

        for name in ('bank_lerp', 'pitch_lerp', 'yaw_lerp', 'rotation_lerp', 'position_lerp'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(name, value, "Lerp factor must be within [0, 1]")

        for name in ('elevation_influence', 'yaw_gain'):
            if not math.isfinite(getattr(self, name)):
                raise ConfigurationError(name, getattr(self, name), "Expected a finite value")

    def with_overrides(self, **overrides) -> "TuningConfig":
        """Copy of this configuration with the given fields replaced."""
        unknown = set(overrides) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigurationError(', '.join(sorted(unknown)), None, "Unknown tuning field")
        return replace(self, **overrides)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "TuningConfig":
        """Builds a configuration from a plain mapping, e.g. parsed JSON."""
        return cls().with_overrides(**dict(values))

    def to_dict(self) -> Dict[str, Any]:
        result = {f.name: getattr(self, f.name) for f in fields(self)}
        result['curve_type'] = self.curve_type.value
        result['debug'] = {'enabled': self.debug.enabled, 'log_interval': self.debug.log_interval}
        return result
