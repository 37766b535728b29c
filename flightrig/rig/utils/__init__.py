# flightrig/rig/utils/__init__.py
from .vectors import (
    safe_normalize, lerp, clamp, horizontal, look_rotation,
    axis_rotation, slerp, normalized_quat, flight_axes
)

__all__ = [
    'safe_normalize', 'lerp', 'clamp', 'horizontal', 'look_rotation',
    'axis_rotation', 'slerp', 'normalized_quat', 'flight_axes'
]
