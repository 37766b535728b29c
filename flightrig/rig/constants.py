# flightrig/rig/constants.py

class RigConstants:
    """Shipped tuning values for the scroll-driven flight"""

    # ===== ANIMATION =====
    ANIMATION = {
        'NO_OF_POINTS': 1200,       # Curve resolution
        'SCROLL_SMOOTHING': 1.0,    # Progress smoothing rate (1/s)
        'MOVEMENT_SMOOTHING': 3.0,  # Camera smoothing rate (1/s)
    }

    # ===== CAMERA =====
    CAMERA = {
        'HEIGHT': 1.6,              # Above the vehicle
        'DISTANCE': 8.0,            # Behind the vehicle
        'INITIAL_POSITION': (0.0, 1.5, 8.0),
    }

    # ===== VEHICLE =====
    PLANE = {
        'MAX_BANK_ANGLE': 0.8,      # rad, about 45 degrees
        'BANK_GAIN': 5.0,
        'BANK_LERP': 0.01,          # Lower = smoother
        'PITCH_LERP': 0.1,
        'YAW_LERP': 0.1,
        'YAW_GAIN': 0.5,
        'ROTATION_LERP': 0.1,       # How quickly the vehicle turns to face its heading
        'POSITION_LERP': 0.1,
        'LOOK_AHEAD': 5,            # Samples ahead used for banking
        'MAX_PITCH_ANGLE': 0.4,     # rad, about 23 degrees
        'ELEVATION_INFLUENCE': 0.8, # Pitch per unit of rise between samples
    }

    # ===== DEBUG =====
    DEBUG = {
        'ENABLED': False,
        'LOG_INTERVAL': 60,         # Frames between telemetry records
    }

    WORLD_UP = (0.0, 1.0, 0.0)
    INITIAL_FORWARD = (0.0, 0.0, -1.0)
