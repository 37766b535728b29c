#!/usr/bin/env python3
# flightrig/rig/tests/test_flight_rig.py

import sys
from pathlib import Path
import unittest

import numpy as np

project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from flightrig.path import PathCurve, default_control_points
from flightrig.rig import FlightRig, TuningConfig, DebugConfig, RigOutput

STRAIGHT = [(0, 0, 0), (0, 0, -100)]

class TestFlightRig(unittest.TestCase):
    def setUp(self):
        self.rig = FlightRig.from_control_points(default_control_points(), TuningConfig(curve_resolution=600))

    def test_initial_state(self):
        state = self.rig.state
        self.assertEqual(state.progress, 0.0)
        self.assertEqual(state.frame_count, 0)
        np.testing.assert_allclose(state.position, [0, 0, 0], atol=1e-9)
        np.testing.assert_allclose(state.camera_position, [0, 1.5, 8])
        np.testing.assert_allclose(state.last_forward, [0, 0, -1])

    def test_from_control_points_uses_config_curve_settings(self):
        self.assertEqual(self.rig.curve.resolution, 600)
        self.assertEqual(self.rig.curve.curve_type, self.rig.config.curve_type)

    def test_step_publishes_transforms(self):
        output = self.rig.step(0.3, 0.016)
        self.assertIsInstance(output, RigOutput)
        self.assertEqual(output.frame, 1)
        self.assertAlmostEqual(output.progress, 0.3 * 0.016)
        self.assertEqual(output.vehicle.orientation.shape, (4,))
        np.testing.assert_allclose(output.camera.position, self.rig.state.camera_position)

    def test_object_transform_matches_output(self):
        output = self.rig.step(0.4, 0.05)
        transform = self.rig.object_transform
        np.testing.assert_allclose(transform.position, output.vehicle.position)
        np.testing.assert_allclose(transform.orientation, output.vehicle.orientation)
        np.testing.assert_allclose(self.rig.camera_transform.look_at, output.camera.look_at)

    def test_progress_lags_raw_input(self):
        self.rig.step(1.0, 0.016)
        self.assertLess(self.rig.state.progress, 0.1)

    def test_advance_is_deterministic_and_pure(self):
        start = self.rig.state.copy()
        first = self.rig.advance(start, 0.4, 0.016)
        second = self.rig.advance(start, 0.4, 0.016)
        np.testing.assert_allclose(first.position, second.position)
        np.testing.assert_allclose(first.orientation.as_quat(), second.orientation.as_quat())
        self.assertEqual(self.rig.state.frame_count, 0)
        self.assertEqual(start.frame_count, 0)
        self.assertEqual(first.frame_count, 1)

    def test_orientation_unit_norm_over_full_sweep(self):
        for progress in np.linspace(0.0, 1.0, 600):
            self.rig.step(progress, 0.5)
            self.assertAlmostEqual(np.linalg.norm(self.rig.state.orientation.as_quat()), 1.0, delta=1e-6)
        self.assertTrue(np.all(np.isfinite(self.rig.state.position)))

    def test_clamped_bank_stays_bounded(self):
        config = TuningConfig(curve_resolution=600, clamp_bank_angle=True, bank_lerp=0.5)
        rig = FlightRig.from_control_points(default_control_points(), config)
        for progress in np.linspace(0.0, 1.0, 400):
            rig.step(progress, 0.5)
            self.assertLessEqual(abs(rig.state.bank_angle), config.max_bank_angle + 1e-12)

    def test_zero_delta_holds_progress_and_camera(self):
        self.rig.step(0.5, 0.016)
        before = self.rig.state.copy()
        self.rig.step(0.9, 0.0)
        self.assertEqual(self.rig.state.progress, before.progress)
        np.testing.assert_allclose(self.rig.state.camera_position, before.camera_position)
        self.assertEqual(self.rig.state.frame_count, before.frame_count + 1)

    def test_non_finite_delta_is_treated_as_zero(self):
        self.rig.step(0.5, 0.016)
        progress = self.rig.state.progress
        with self.assertLogs('flightrig.rig.core', level='WARNING'):
            self.rig.step(0.5, float('nan'))
        self.assertEqual(self.rig.state.progress, progress)
        self.assertTrue(np.all(np.isfinite(self.rig.state.camera_position)))

    def test_raw_progress_outside_range_is_clamped(self):
        with self.assertLogs('flightrig.rig.core', level='WARNING'):
            self.rig.step(3.0, 1.0)
        self.assertAlmostEqual(self.rig.state.progress, 1.0)

    def test_reset(self):
        for _ in range(5):
            self.rig.step(0.8, 0.1)
        self.rig.reset()
        self.assertEqual(self.rig.state.frame_count, 0)
        self.assertEqual(self.rig.state.progress, 0.0)

class TestConvergence(unittest.TestCase):
    def test_held_progress_converges(self):
        rig = FlightRig(PathCurve(STRAIGHT, resolution=200))
        target = rig.curve.sample_at(0.5)

        progress_errors, position_errors = [], []
        for _ in range(1500):
            rig.step(0.5, 0.016)
            progress_errors.append(abs(0.5 - rig.state.progress))
            position_errors.append(np.linalg.norm(rig.state.position - target))

        self.assertTrue(all(b <= a for a, b in zip(progress_errors, progress_errors[1:])))
        self.assertTrue(all(b <= a + 1e-12 for a, b in zip(position_errors, position_errors[1:])))
        self.assertLess(progress_errors[-1], 1e-4)
        self.assertLess(position_errors[-1], 0.1)

    def test_camera_settles_behind_vehicle(self):
        rig = FlightRig(PathCurve(STRAIGHT, resolution=200))
        for _ in range(3000):
            rig.step(0.5, 0.016)
        expected = rig.curve.sample_at(rig.state.progress) + np.array([0.0, 1.6, 8.0])
        np.testing.assert_allclose(rig.state.camera_position, expected, atol=1e-2)
        np.testing.assert_allclose(rig.state.camera_look_at, rig.curve.sample_at(rig.state.progress), atol=1e-2)

class TestDegeneratePath(unittest.TestCase):
    def test_coincident_samples_keep_last_forward(self):
        rig = FlightRig.from_control_points([(0, 0, 0), (0, 0, 0)], TuningConfig(curve_resolution=50))
        for _ in range(20):
            rig.step(0.7, 0.05)
        np.testing.assert_allclose(rig.state.last_forward, [0, 0, -1])
        self.assertTrue(np.all(np.isfinite(rig.state.orientation.as_quat())))
        self.assertTrue(np.all(np.isfinite(rig.state.camera_position)))

class TestDebugTelemetry(unittest.TestCase):
    def test_emits_every_interval(self):
        config = TuningConfig(curve_resolution=200, debug=DebugConfig(enabled=True, log_interval=2))
        rig = FlightRig.from_control_points(default_control_points(), config)
        with self.assertLogs('flightrig.rig.core', level='INFO') as logs:
            for _ in range(4):
                rig.step(0.2, 0.016)
        debug_lines = [line for line in logs.output if 'FLIGHT DEBUG' in line]
        self.assertEqual(len(debug_lines), 2)
        for key in ('bank_deg', 'pitch_deg', 'yaw_deg', 'position', 'x_axis', 'y_axis', 'z_axis', 'turn_amount'):
            self.assertIn(key, rig.last_telemetry)
        self.assertEqual(rig.last_telemetry['frame'], 4)

    def test_toggle_does_not_affect_motion(self):
        quiet = FlightRig.from_control_points(default_control_points(), TuningConfig(curve_resolution=200))
        noisy = FlightRig.from_control_points(default_control_points(), TuningConfig(curve_resolution=200))
        self.assertTrue(noisy.toggle_debug())
        for _ in range(120):
            quiet.step(0.3, 0.016)
            noisy.step(0.3, 0.016)
        self.assertIsNone(quiet.last_telemetry)
        self.assertIsNotNone(noisy.last_telemetry)
        np.testing.assert_allclose(quiet.state.position, noisy.state.position)
        np.testing.assert_allclose(quiet.state.orientation.as_quat(), noisy.state.orientation.as_quat())

if __name__ == '__main__':
    unittest.main()
