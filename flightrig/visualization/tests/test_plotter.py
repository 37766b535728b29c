#!/usr/bin/env python3
# flightrig/visualization/tests/test_plotter.py

import sys
import os
import tempfile
from pathlib import Path
import unittest

import matplotlib
matplotlib.use("Agg")

project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from flightrig.path import default_control_points
from flightrig.rig import FlightRig, TuningConfig
from flightrig.visualization import FlightVisualizer, simulate_scroll

class TestFlightVisualizer(unittest.TestCase):
    def setUp(self):
        self.rig = FlightRig.from_control_points(default_control_points(), TuningConfig(curve_resolution=300))
        self.records = simulate_scroll(self.rig, [i / 99 for i in range(100)], delta_time=0.05)
        self.visualizer = FlightVisualizer()

    def test_simulate_scroll_records_every_frame(self):
        self.assertEqual(len(self.records), 100)
        self.assertEqual(self.records[-1]['frame'], 100)
        self.assertIn('bank_deg', self.records[0])
        self.assertEqual(self.rig.state.frame_count, 100)

    def test_3d_plot_traces(self):
        fig = self.visualizer.create_3d_plot(self.rig.curve, self.records)
        self.assertEqual([trace.name for trace in fig.data], ['Curve Samples', 'Control Points', 'Vehicle', 'Camera'])

    def test_3d_plot_without_records(self):
        fig = self.visualizer.create_3d_plot(self.rig.curve, [])
        self.assertEqual(len(fig.data), 2)

    def test_outputs_written(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            html_path = os.path.join(tmp_dir, 'flight.html')
            png_path = os.path.join(tmp_dir, 'angles.png')
            self.visualizer.save_3d_plot(self.visualizer.create_3d_plot(self.rig.curve, self.records), html_path)
            self.visualizer.plot_angle_history(self.records, png_path)
            self.assertTrue(os.path.getsize(html_path) > 0)
            self.assertTrue(os.path.getsize(png_path) > 0)

if __name__ == '__main__':
    unittest.main()
