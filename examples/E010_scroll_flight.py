#!/usr/bin/env python3
"""
Headless scroll replay: drives the flight rig with a simulated scroll wheel
and prints the published vehicle and camera transforms.
"""
import sys
import math
import logging
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

from flightrig.path import PathCurve, default_control_points
from flightrig.rig import FlightRig, TuningConfig, DebugConfig

# --- SCENARIO PARAMETERS ---
FRAME_RATE = 60
DURATION_SEC = 20
# Mouse-wheel style input: discrete jumps every half second
SCROLL_TICK_SEC = 0.5
SCROLL_TICK_SIZE = 0.025

def scroll_signal(t: float) -> float:
    """Raw scroll offset in [0, 1] reported at time t."""
    return min(1.0, math.floor(t / SCROLL_TICK_SEC) * SCROLL_TICK_SIZE)

def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    print("--- Scroll-Driven Flight Replay ---")

    config = TuningConfig(debug=DebugConfig(enabled=True, log_interval=FRAME_RATE * 2))
    curve = PathCurve(
        default_control_points(),
        curve_type=config.curve_type,
        tension=config.curve_tension,
        resolution=config.curve_resolution
    )
    rig = FlightRig(curve, config)

    delta_time = 1.0 / FRAME_RATE
    for frame in range(FRAME_RATE * DURATION_SEC):
        output = rig.step(scroll_signal(frame * delta_time), delta_time)
        if output.frame % FRAME_RATE == 0:
            pos = output.vehicle.position
            cam = output.camera.position
            print(f"t={output.frame / FRAME_RATE:5.1f}s progress={output.progress:.3f} "
                  f"vehicle=({pos[0]:7.2f}, {pos[1]:5.2f}, {pos[2]:8.2f}) "
                  f"camera=({cam[0]:7.2f}, {cam[1]:5.2f}, {cam[2]:8.2f})")

    print(f"\nFinished after {rig.state.frame_count} frames at progress {rig.state.progress:.3f}.")

if __name__ == '__main__':
    main()
