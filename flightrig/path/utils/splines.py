# flightrig/path/utils/splines.py
"""
Piecewise cubic evaluation used to precompute curve samples.

All functions are vectorised over the parameter array `t` (values in [0, 1])
and return an (len(t), 3) array of positions.
"""
import numpy as np
from scipy.interpolate import splprep, splev

from ..constants import PathConstants
from ..data_models import CurveType

# Exponent applied to the segment length for the non-uniform knot spacing
_KNOT_EXPONENTS = {
    CurveType.CENTRIPETAL: 0.5,
    CurveType.CHORDAL: 1.0,
}

def _pad_with_phantoms(points: np.ndarray) -> np.ndarray:
    """Reflects the first and last segment to create the missing end neighbours."""
    head = 2.0 * points[0] - points[1]
    tail = 2.0 * points[-1] - points[-2]
    return np.vstack((head, points, tail))

def _segment_coordinates(count: int, t: np.ndarray):
    """Splits global parameters into (segment index, local weight) pairs."""
    scaled = (count - 1) * t
    segment = np.floor(scaled).astype(int)
    weight = scaled - segment
    # t == 1 lands on the end of the last segment, not the start of a missing one
    at_end = segment >= count - 1
    segment[at_end] = count - 2
    weight[at_end] = 1.0
    return segment, weight

def _hermite(p1, p2, t1, t2, w):
    w = w[:, None]
    c2 = -3.0 * p1 + 3.0 * p2 - 2.0 * t1 - t2
    c3 = 2.0 * p1 - 2.0 * p2 + t1 + t2
    return p1 + t1 * w + c2 * w ** 2 + c3 * w ** 3

def sample_catmull_rom(points: np.ndarray, t: np.ndarray, curve_type: CurveType = CurveType.CHORDAL,
                       tension: float = PathConstants.DEFAULT_TENSION) -> np.ndarray:
    """
    Evaluates an open Catmull-Rom spline through `points`.

    Args:
        points: (M, 3) control points, M >= 2.
        t: Parameter values in [0, 1]; segments are spaced uniformly in t.
        curve_type: CENTRIPETAL or CHORDAL for non-uniform knots, CATMULLROM for
            the uniform variant driven by `tension`.
        tension: Tangent scale of the uniform variant.
    """
    t = np.clip(np.asarray(t, dtype=float), 0.0, 1.0)
    padded = _pad_with_phantoms(points)
    segment, weight = _segment_coordinates(len(points), t)

    p0 = padded[segment]
    p1 = padded[segment + 1]
    p2 = padded[segment + 2]
    p3 = padded[segment + 3]

    if curve_type == CurveType.CATMULLROM:
        return _hermite(p1, p2, tension * (p2 - p0), tension * (p3 - p1), weight)

    exponent = _KNOT_EXPONENTS[curve_type]
    eps = PathConstants.KNOT_EPSILON
    dt0 = np.linalg.norm(p1 - p0, axis=1) ** exponent
    dt1 = np.linalg.norm(p2 - p1, axis=1) ** exponent
    dt2 = np.linalg.norm(p3 - p2, axis=1) ** exponent

    # Coincident neighbours would collapse the knot vector
    dt1 = np.where(dt1 < eps, 1.0, dt1)
    dt0 = np.where(dt0 < eps, dt1, dt0)
    dt2 = np.where(dt2 < eps, dt1, dt2)

    dt0, dt1, dt2 = dt0[:, None], dt1[:, None], dt2[:, None]
    t1 = (p1 - p0) / dt0 - (p2 - p0) / (dt0 + dt1) + (p2 - p1) / dt1
    t2 = (p2 - p1) / dt1 - (p3 - p1) / (dt1 + dt2) + (p3 - p2) / dt2

    return _hermite(p1, p2, t1 * dt1, t2 * dt1, weight)

def sample_bspline(points: np.ndarray, t: np.ndarray) -> np.ndarray:
    """Evaluates an interpolating B-spline parameterised by cumulative chord length."""
    t = np.clip(np.asarray(t, dtype=float), 0.0, 1.0)

    # Consecutive duplicates break the spline fit
    unique_mask = np.concatenate(([True], np.any(np.diff(points, axis=0) != 0, axis=1)))
    coords = points[unique_mask]
    if len(coords) < 2:
        return np.repeat(coords[:1], len(t), axis=0)

    u = np.concatenate(([0.0], np.cumsum(np.linalg.norm(np.diff(coords, axis=0), axis=1))))
    u /= u[-1]

    k = min(3, len(coords) - 1)
    tck, _ = splprep([coords[:, 0], coords[:, 1], coords[:, 2]], u=u, s=0, k=k)
    x, y, z = splev(t, tck)
    return np.column_stack((x, y, z))

def sample_curve(points: np.ndarray, count: int, curve_type: CurveType,
                 tension: float = PathConstants.DEFAULT_TENSION) -> np.ndarray:
    """Returns `count` samples evenly spaced in curve parameter from start to end."""
    t = np.linspace(0.0, 1.0, count)
    if curve_type == CurveType.BSPLINE:
        return sample_bspline(points, t)
    return sample_catmull_rom(points, t, curve_type, tension)
