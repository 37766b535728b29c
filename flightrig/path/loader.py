# flightrig/path/loader.py
"""
Reads and writes authored control points as JSON.

Two layouts are accepted:
    [[x, y, z], ...]
    {"points": [{"x": .., "y": .., "z": ..}, ...]}
"""
import json
import logging
import os
from typing import List, Sequence

from .constants import PathConstants
from .data_models import ControlPoint
from .exceptions import ControlPointLoadError

logger = logging.getLogger(__name__)

def default_control_points() -> List[ControlPoint]:
    """The shipped eight-point flight path."""
    return list(PathConstants.DEFAULT_POINTS)

def _parse_point(entry) -> ControlPoint:
    if isinstance(entry, dict):
        return ControlPoint(float(entry['x']), float(entry['y']), float(entry['z']))
    return ControlPoint.from_sequence(entry)

def load_control_points(file_path: str) -> List[ControlPoint]:
    """
    Loads control points from a JSON file.

    Raises:
        ControlPointLoadError: If the file is missing, unreadable or malformed
    """
    if not os.path.exists(file_path):
        raise ControlPointLoadError(file_path, "Control point file not found")

    try:
        with open(file_path, 'r') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise ControlPointLoadError(file_path, f"Could not read control points ({e})") from e

    entries = data.get('points') if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise ControlPointLoadError(file_path, "Expected a list of points")

    try:
        points = [_parse_point(entry) for entry in entries]
    except (KeyError, TypeError, ValueError) as e:
        raise ControlPointLoadError(file_path, f"Malformed control point ({e})") from e

    logger.info(f"Loaded {len(points)} control points from {file_path}")
    return points

def save_control_points(points: Sequence[ControlPoint], file_path: str) -> None:
    """Writes control points in the list-of-triples layout."""
    try:
        with open(file_path, 'w') as f:
            json.dump([[p.x, p.y, p.z] for p in points], f, indent=2)
    except IOError as e:
        raise ControlPointLoadError(file_path, f"Could not write control points ({e})") from e
