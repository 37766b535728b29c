#!/usr/bin/env python3
"""
Rig Systems Package
Progress smoothing, orientation solving and motion smoothing used by FlightRig
"""
from .progress import ProgressSmoother, smooth_progress, sanitize_delta, sanitize_progress
from .orientation import OrientationSolver
from .motion import MotionSmoother

# Public API
__all__ = [
    'ProgressSmoother',
    'smooth_progress',
    'sanitize_delta',
    'sanitize_progress',
    'OrientationSolver',
    'MotionSmoother'
]
