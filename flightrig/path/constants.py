# flightrig/path/constants.py
from .data_models import ControlPoint, CurveType

class PathConstants:
    # --- SAMPLING ---
    DEFAULT_RESOLUTION = 1200       # Precomputed samples along the curve
    MIN_CONTROL_POINTS = 2
    DEFAULT_CURVE_TYPE = CurveType.CHORDAL
    DEFAULT_TENSION = 0.5           # Only used by uniform Catmull-Rom

    # Knot spacing below this is treated as coincident points
    KNOT_EPSILON = 1e-4

    # --- DEFAULT AUTHORED PATH ---
    # Each leg advances this far along -Z
    SEGMENT_DEPTH = -50.0

    DEFAULT_POINTS = (
        ControlPoint(0.0, 0.0, 0.0),
        ControlPoint(0.0, 0.0, SEGMENT_DEPTH),
        ControlPoint(-50.0, 1.0, SEGMENT_DEPTH * 2),
        ControlPoint(100.0, 2.0, SEGMENT_DEPTH * 3),
        ControlPoint(100.0, 0.0, SEGMENT_DEPTH * 4),
        ControlPoint(5.0, -1.0, SEGMENT_DEPTH * 5),
        ControlPoint(6.0, 0.0, SEGMENT_DEPTH * 6),
        ControlPoint(3.0, 2.0, SEGMENT_DEPTH * 7),
    )
