# flightrig/path/utils/__init__.py
"""
Spline helpers used by PathCurve to precompute its samples.
"""
from .splines import sample_curve, sample_catmull_rom, sample_bspline

__all__ = [
    "sample_curve",
    "sample_catmull_rom",
    "sample_bspline"
]
