# flightrig/path/__init__.py
"""
Authored flight path: control points, curve sampling and loading.
"""
from .core import PathCurve
from .data_models import ControlPoint, CurveType
from .exceptions import PathError, InvalidPathError, ControlPointLoadError
from .loader import load_control_points, save_control_points, default_control_points

__all__ = [
    "PathCurve",
    "ControlPoint",
    "CurveType",
    "PathError",
    "InvalidPathError",
    "ControlPointLoadError",
    "load_control_points",
    "save_control_points",
    "default_control_points"
]
