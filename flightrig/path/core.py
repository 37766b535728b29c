# flightrig/path/core.py
"""
The authored flight path. Control points are turned into a dense, read-only
table of samples once; every per-frame lookup afterwards is O(1).
"""
import logging
import math
from typing import Iterable, List, Tuple, Union

import numpy as np

from .constants import PathConstants
from .data_models import ControlPoint, CurveType
from .exceptions import InvalidPathError
from .utils.splines import sample_curve

logger = logging.getLogger(__name__)

PointLike = Union[ControlPoint, Tuple[float, float, float], List[float], np.ndarray]

def _to_control_points(points: Iterable[PointLike]) -> List[ControlPoint]:
    result = []
    for point in points:
        if isinstance(point, ControlPoint):
            result.append(point)
            continue
        try:
            result.append(ControlPoint.from_sequence(point))
        except (TypeError, ValueError) as e:
            raise InvalidPathError("control point must have three numeric coordinates", point) from e
    return result

class PathCurve:
    """Continuous, progress-parameterised curve through an ordered list of control points."""

    def __init__(
        self,
        control_points: Iterable[PointLike],
        curve_type: Union[CurveType, str] = PathConstants.DEFAULT_CURVE_TYPE,
        tension: float = PathConstants.DEFAULT_TENSION,
        resolution: int = PathConstants.DEFAULT_RESOLUTION
    ):
        """
        Args:
            control_points: Ordered authored points (ControlPoints, triples or an (M, 3) array)
            curve_type: Interpolation mode, a CurveType or its string value
            tension: Tangent scale for the uniform Catmull-Rom mode
            resolution: Number of precomputed samples, at least 2

        Raises:
            InvalidPathError: If the points or settings cannot form a curve
        """
        points = _to_control_points(control_points)
        if len(points) < PathConstants.MIN_CONTROL_POINTS:
            raise InvalidPathError(f"at least {PathConstants.MIN_CONTROL_POINTS} control points are required", len(points))

        coords = np.array([p.as_array() for p in points], dtype=float)
        if not np.all(np.isfinite(coords)):
            raise InvalidPathError("control points must have finite coordinates")

        if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)) or resolution <= 1:
            raise InvalidPathError("resolution must be an integer greater than 1", resolution)

        try:
            self.curve_type = CurveType(curve_type)
        except ValueError as e:
            raise InvalidPathError("unknown curve type", curve_type) from e

        if not math.isfinite(tension):
            raise InvalidPathError("tension must be finite", tension)

        self.control_points: Tuple[ControlPoint, ...] = tuple(points)
        self.tension = float(tension)
        self.resolution = int(resolution)

        samples = sample_curve(coords, self.resolution, self.curve_type, self.tension)
        samples.setflags(write=False)
        self._samples = samples
        self._length = float(np.sum(np.linalg.norm(np.diff(samples, axis=0), axis=1)))

        logger.info(
            f"PathCurve built: {len(points)} control points, {self.resolution} samples, "
            f"type '{self.curve_type.value}', length {self._length:.1f}"
        )

    def __len__(self) -> int:
        return self.resolution

    def __repr__(self) -> str:
        return (f"PathCurve(points={len(self.control_points)}, resolution={self.resolution}, "
                f"curve_type={self.curve_type.value!r})")

    @property
    def samples(self) -> np.ndarray:
        """Read-only (N, 3) array of precomputed samples."""
        return self._samples

    @property
    def length(self) -> float:
        """Polyline length through the samples."""
        return self._length

    @property
    def start(self) -> np.ndarray:
        return self._samples[0].copy()

    @property
    def end(self) -> np.ndarray:
        return self._samples[-1].copy()

    def _scaled(self, progress: float) -> float:
        p = float(progress)
        p = min(max(p, 0.0), 1.0) if math.isfinite(p) else 0.0
        return p * (self.resolution - 1)

    def sample_index(self, progress: float) -> int:
        """Index of the sample at or before `progress`, clamped so a next sample always exists."""
        return min(int(math.floor(self._scaled(progress))), self.resolution - 2)

    def fraction_at(self, progress: float) -> float:
        """Interpolation weight between `sample_index(progress)` and the following sample."""
        return self._scaled(progress) - self.sample_index(progress)

    def point(self, index: int) -> np.ndarray:
        """Copy of the sample at `index`, clamped into the valid range."""
        index = min(max(int(index), 0), self.resolution - 1)
        return self._samples[index].copy()

    def sample_at(self, progress: float) -> np.ndarray:
        """Position on the curve at `progress` in [0, 1]."""
        index = self.sample_index(progress)
        weight = self.fraction_at(progress)
        return self._samples[index] + (self._samples[index + 1] - self._samples[index]) * weight

    def bracket(self, progress: float, look_ahead: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Samples needed for one animation frame.

        Returns:
            (current sample, next sample, sample `look_ahead` indices ahead, interpolated position)
        """
        index = self.sample_index(progress)
        current = self.point(index)
        nxt = self.point(index + 1)
        future = self.point(index + look_ahead)
        position = current + (nxt - current) * self.fraction_at(progress)
        return current, nxt, future, position
