# flightrig/path/exceptions.py
"""
Path Exceptions
Error types raised while building or loading an authored flight path
"""

class PathError(Exception):
    """Base class for all flight path errors"""
    pass

class InvalidPathError(PathError):
    """The control points or curve settings cannot form a sampled curve"""
    def __init__(self, reason, value=None):
        self.reason = reason
        self.value = value
        super().__init__(f"Invalid path: {reason}" + (f" ({value!r})" if value is not None else ""))

class ControlPointLoadError(PathError):
    """Control points could not be read from or written to disk"""
    def __init__(self, file_path, message="Failed to load control points"):
        self.file_path = file_path
        super().__init__(f"{message}: {file_path}")
