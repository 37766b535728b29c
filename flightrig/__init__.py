# flightrig/__init__.py
"""
flightrig - scroll-driven path following for a vehicle and its trailing camera
"""

from .path import (
    PathCurve, ControlPoint, CurveType, PathError, InvalidPathError,
    ControlPointLoadError, load_control_points, save_control_points, default_control_points
)
from .rig import (
    FlightRig, TuningConfig, DebugConfig, FlightState, RigOutput,
    ProgressSmoother, OrientationSolver, MotionSmoother, RigError, ConfigurationError
)

__all__ = [
    'PathCurve',
    'ControlPoint',
    'CurveType',
    'PathError',
    'InvalidPathError',
    'ControlPointLoadError',
    'load_control_points',
    'save_control_points',
    'default_control_points',
    'FlightRig',
    'TuningConfig',
    'DebugConfig',
    'FlightState',
    'RigOutput',
    'ProgressSmoother',
    'OrientationSolver',
    'MotionSmoother',
    'RigError',
    'ConfigurationError'
]
