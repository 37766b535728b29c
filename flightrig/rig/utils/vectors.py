# flightrig/rig/utils/vectors.py
"""
Small vector and rotation helpers shared by the rig systems.
"""
from typing import Optional, Tuple

import numpy as np
from scipy.spatial.transform import Rotation, Slerp

# Below this length a direction is considered degenerate
EPSILON = 1e-9

def safe_normalize(vector: np.ndarray, fallback: Optional[np.ndarray] = None) -> Optional[np.ndarray]:
    """
    Unit vector along `vector`, or a copy of `fallback` when `vector` has no length.

    Returns:
        np.ndarray, or None if both are degenerate and no fallback is given
    """
    vector = np.asarray(vector, dtype=float)
    norm = np.linalg.norm(vector)
    if norm > EPSILON and np.isfinite(norm):
        return vector / norm
    if fallback is None:
        return None
    return np.array(fallback, dtype=float)

def lerp(start, end, factor: float):
    """Linear interpolation; works for scalars and arrays."""
    return start + (end - start) * factor

def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))

def horizontal(vector: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Component of `vector` perpendicular to `up` (`up` must be unit length)."""
    return vector - np.dot(vector, up) * up

def look_rotation(forward: np.ndarray, up: np.ndarray) -> Rotation:
    """
    Rotation that turns the canonical forward axis (-Z) toward `forward`,
    keeping local +Y as close to `up` as possible.
    """
    z_axis = safe_normalize(-np.asarray(forward, dtype=float), np.array([0.0, 0.0, 1.0]))
    x_axis = np.cross(up, z_axis)
    if np.linalg.norm(x_axis) < EPSILON:
        # Looking straight along up: nudge z off the up axis
        z_axis = z_axis.copy()
        if abs(abs(up[2]) - 1.0) < EPSILON:
            z_axis[0] += 1e-4
        else:
            z_axis[2] += 1e-4
        z_axis = z_axis / np.linalg.norm(z_axis)
        x_axis = np.cross(up, z_axis)
    x_axis = x_axis / np.linalg.norm(x_axis)
    y_axis = np.cross(z_axis, x_axis)
    return Rotation.from_matrix(np.column_stack((x_axis, y_axis, z_axis)))

def axis_rotation(axis: np.ndarray, angle: float) -> Rotation:
    """Rotation of `angle` radians about `axis`; identity for a degenerate axis."""
    unit = safe_normalize(axis)
    if unit is None:
        return Rotation.identity()
    return Rotation.from_rotvec(unit * angle)

def slerp(start: Rotation, end: Rotation, factor: float) -> Rotation:
    """Spherical interpolation along the shortest arc."""
    interpolator = Slerp([0.0, 1.0], Rotation.concatenate([start, end]))
    return interpolator([clamp(factor, 0.0, 1.0)])[0]

def normalized_quat(rotation: Rotation) -> Rotation:
    """Re-normalises the underlying quaternion to suppress drift."""
    quat = rotation.as_quat()
    return Rotation.from_quat(quat / np.linalg.norm(quat))

def flight_axes(orientation: Rotation) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Local x (right), y (up) and z (back) axes expressed in world space."""
    x_axis, y_axis, z_axis = orientation.apply(np.eye(3))
    return x_axis, y_axis, z_axis
