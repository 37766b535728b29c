#!/usr/bin/env python3
# flightrig/rig/tests/test_motion.py

import sys
from pathlib import Path
import unittest

import numpy as np
from scipy.spatial.transform import Rotation

project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from flightrig.rig.config import TuningConfig
from flightrig.rig.data_models import FlightState
from flightrig.rig.systems.motion import MotionSmoother
from flightrig.rig.systems.orientation import OrientationSolver

ORIGIN = np.zeros(3)
NORTH = np.array([0.0, 0.0, -1.0])

class TestMotionSmoother(unittest.TestCase):
    def setUp(self):
        self.config = TuningConfig()
        self.solver = OrientationSolver(self.config)
        self.smoother = MotionSmoother(self.config)
        self.targets = self.solver.solve(ORIGIN, NORTH, np.array([3.0, 0.5, -5.0]), NORTH)

    def test_angles_lerp_by_fixed_factors(self):
        state = FlightState()
        new_state = self.smoother.step(state, self.targets, ORIGIN, 0.016)
        self.assertAlmostEqual(new_state.bank_angle, self.targets.bank_target * self.config.bank_lerp)
        self.assertAlmostEqual(new_state.pitch_angle, self.targets.pitch_target * self.config.pitch_lerp)
        self.assertAlmostEqual(new_state.yaw_angle, self.targets.yaw_target * self.config.yaw_lerp)

    def test_angles_advance_on_zero_delta(self):
        new_state = self.smoother.step(FlightState(), self.targets, ORIGIN, 0.0)
        self.assertNotEqual(new_state.bank_angle, 0.0)

    def test_input_state_is_not_mutated(self):
        state = FlightState()
        before = state.copy()
        self.smoother.step(state, self.targets, np.array([1.0, 2.0, 3.0]), 0.016)
        np.testing.assert_allclose(state.position, before.position)
        np.testing.assert_allclose(state.camera_position, before.camera_position)
        self.assertEqual(state.bank_angle, before.bank_angle)
        np.testing.assert_allclose(state.orientation.as_quat(), before.orientation.as_quat())

    def test_position_lerps_toward_target(self):
        target = np.array([10.0, 0.0, 0.0])
        new_state = self.smoother.step(FlightState(), self.targets, target, 0.016)
        np.testing.assert_allclose(new_state.position, target * self.config.position_lerp)

    def test_camera_is_frame_rate_independent(self):
        target = np.array([0.0, 0.0, -10.0])
        held = self.smoother.step(FlightState(), self.targets, target, 0.0)
        np.testing.assert_allclose(held.camera_position, ORIGIN)
        np.testing.assert_allclose(held.camera_look_at, ORIGIN)

        moved = self.smoother.step(FlightState(), self.targets, target, 0.1)
        np.testing.assert_allclose(moved.camera_look_at, target * 0.1 * self.config.camera_smoothing)

    def test_camera_offset_follows_orientation(self):
        level = self.solver.solve(ORIGIN, NORTH, NORTH * 5, NORTH)
        state = FlightState()
        for _ in range(10):
            state = self.smoother.step(state, level, ORIGIN, 1.0)
        np.testing.assert_allclose(state.camera_position, self.config.camera_offset, atol=1e-9)

    def test_orientation_stays_unit_length(self):
        rng = np.random.default_rng(7)
        state = FlightState()
        for _ in range(500):
            cur = rng.normal(size=3) * 10
            targets = self.solver.solve(cur, cur + rng.normal(size=3), cur + rng.normal(size=3) * 5, state.last_forward)
            state = self.smoother.step(state, targets, cur, rng.uniform(0.0, 0.05))
            self.assertAlmostEqual(np.linalg.norm(state.orientation.as_quat()), 1.0, delta=1e-6)

    def test_slerp_moves_toward_target_rotation(self):
        turn = self.solver.solve(ORIGIN, np.array([1.0, 0.0, 0.0]), np.array([5.0, 0.0, 0.0]), NORTH)
        state = FlightState()
        first = self.smoother.step(state, turn, ORIGIN, 0.016)
        target = self.smoother.compose_rotation(turn, first.bank_angle, first.pitch_angle, first.yaw_angle)
        before = (target * state.orientation.inv()).magnitude()
        after = (target * first.orientation.inv()).magnitude()
        self.assertAlmostEqual(after, before * (1 - self.config.rotation_lerp), places=6)

    def test_last_forward_updated(self):
        turn = self.solver.solve(ORIGIN, np.array([1.0, 0.0, 0.0]), np.array([5.0, 0.0, 0.0]), NORTH)
        new_state = self.smoother.step(FlightState(), turn, ORIGIN, 0.016)
        np.testing.assert_allclose(new_state.last_forward, [1.0, 0.0, 0.0])

class TestYawComposition(unittest.TestCase):
    def test_yaw_only_changes_rotation_when_enabled(self):
        config = TuningConfig()
        targets = OrientationSolver(config).solve(ORIGIN, NORTH, NORTH * 5, NORTH)
        without_yaw = MotionSmoother(config).compose_rotation(targets, 0.0, 0.0, 0.3)
        with_yaw = MotionSmoother(config.with_overrides(include_yaw_in_rotation=True)).compose_rotation(targets, 0.0, 0.0, 0.3)

        np.testing.assert_allclose(without_yaw.as_matrix(), targets.base_rotation.as_matrix(), atol=1e-12)
        expected = Rotation.from_rotvec([0.0, 0.3, 0.0])
        self.assertAlmostEqual((with_yaw * expected.inv()).magnitude(), 0.0, places=9)

if __name__ == '__main__':
    unittest.main()
