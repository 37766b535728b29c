# flightrig/rig/systems/progress.py
import math

from ..constants import RigConstants

def sanitize_delta(delta_time: float) -> float:
    """Frame delta usable for smoothing; non-finite or negative deltas count as zero."""
    try:
        delta_time = float(delta_time)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(delta_time) or delta_time < 0:
        return 0.0
    return delta_time

def sanitize_progress(raw_progress: float) -> float:
    """Raw scroll progress clamped into [0, 1]; non-finite input maps to 0."""
    raw_progress = float(raw_progress)
    if not math.isfinite(raw_progress):
        return 0.0
    return min(max(raw_progress, 0.0), 1.0)

def smooth_progress(current: float, raw_progress: float, delta_time: float, smoothing_rate: float) -> float:
    """
    Moves `current` toward `raw_progress` by a frame-rate independent fraction.

    Args:
        current: Animated progress from the previous frame
        raw_progress: Scroll progress reported this frame
        delta_time: Seconds since the previous frame
        smoothing_rate: Higher values track the scroll input more tightly

    Returns:
        float: New animated progress within [0, 1]
    """
    factor = min(1.0, sanitize_delta(delta_time) * smoothing_rate)
    target = sanitize_progress(raw_progress)
    animated = current + (target - current) * factor
    return min(max(animated, 0.0), 1.0)

class ProgressSmoother:
    """Lags a noisy scroll signal into continuous animated progress"""

    def __init__(self, smoothing_rate: float = RigConstants.ANIMATION['SCROLL_SMOOTHING'], initial: float = 0.0):
        self.smoothing_rate = smoothing_rate
        self.progress = sanitize_progress(initial)

    def advance(self, raw_progress: float, delta_time: float) -> float:
        """Advances one frame and returns the animated progress"""
        self.progress = smooth_progress(self.progress, raw_progress, delta_time, self.smoothing_rate)
        return self.progress
