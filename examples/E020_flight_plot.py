#!/usr/bin/env python3
"""
Generates offline tuning artefacts: an interactive 3D view of the path with the
vehicle and camera trajectories, and a plot of the smoothed attitude angles.

Usage:
    python examples/E020_flight_plot.py [control_points.json]
"""
import sys
import logging
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).resolve().parent.parent))

from flightrig.path import default_control_points, load_control_points
from flightrig.rig import FlightRig, TuningConfig
from flightrig.visualization import FlightVisualizer, simulate_scroll

FRAMES = 1800
DELTA_TIME = 1.0 / 60

def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    points = load_control_points(sys.argv[1]) if len(sys.argv) > 1 else default_control_points()
    rig = FlightRig.from_control_points(points, TuningConfig())

    # Steady scroll from start to end
    records = simulate_scroll(rig, np.linspace(0.0, 1.0, FRAMES), DELTA_TIME)

    visualizer = FlightVisualizer()
    visualizer.save_3d_plot(visualizer.create_3d_plot(rig.curve, records), "flight_path_3d.html")
    visualizer.plot_angle_history(records, "flight_angles.png")

if __name__ == '__main__':
    main()
