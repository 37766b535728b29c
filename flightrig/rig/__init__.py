# flightrig/rig/__init__.py
"""
Initializes the rig module, defining its public API.

The rig turns scroll progress into per-frame vehicle and camera transforms.
"""
# Core orchestrator
from .core import FlightRig

# Configuration and state
from .config import TuningConfig, DebugConfig
from .data_models import FlightState, OrientationTargets, ObjectTransform, CameraTransform, RigOutput
from .exceptions import RigError, ConfigurationError

# Individual systems, for callers that drive them directly
from .systems import ProgressSmoother, OrientationSolver, MotionSmoother
