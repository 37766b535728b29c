# flightrig/path/data_models.py
"""
Defines the data structures describing an authored flight path.
"""
from dataclasses import dataclass
from enum import Enum

import numpy as np

class CurveType(str, Enum):
    """Interpolation modes available for turning control points into a curve."""
    CENTRIPETAL = "centripetal"
    CHORDAL = "chordal"
    CATMULLROM = "catmullrom"
    BSPLINE = "bspline"

@dataclass(frozen=True)
class ControlPoint:
    """A single authored 3D coordinate of the flight path."""
    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_sequence(cls, values) -> "ControlPoint":
        x, y, z = values
        return cls(float(x), float(y), float(z))
