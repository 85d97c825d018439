#!/usr/bin/env python3
"""
Unit Tests for Forward Kinematics Module

Covers:
- Closed-form pose computation for known configurations
- Determinism of the pose computation
- Batch mapping over a trajectory
- Workspace checks and input validation

Author: Robot Control Team
"""

import sys
import os
import unittest
import numpy as np

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from kinematics.src.robot_types import JointState, EndEffectorPose
from kinematics.src.forward_kinematic import ForwardKinematics, ForwardKinematicsError


class TestForwardKinematics(unittest.TestCase):
    """Test cases for ForwardKinematics class."""

    def setUp(self):
        self.fk = ForwardKinematics(link1=0.5, link2=0.3)

    def test_home_configuration(self):
        """Zero joint angles stretch the arm along +x."""
        pose = self.fk.compute_forward_kinematics(JointState(0.0, 0.0))
        self.assertAlmostEqual(pose.x, 0.8, places=12)
        self.assertEqual(pose.y, 0.0)

    def test_shoulder_rotated_90_degrees(self):
        pose = self.fk.compute_forward_kinematics(JointState(np.pi / 2, 0.0))
        self.assertAlmostEqual(pose.x, 0.0, places=12)
        self.assertAlmostEqual(pose.y, 0.8, places=12)

    def test_elbow_folded_back(self):
        pose = self.fk.compute_forward_kinematics(JointState(0.0, np.pi))
        self.assertAlmostEqual(pose.x, 0.2, places=12)
        self.assertAlmostEqual(pose.y, 0.0, places=12)

    def test_general_configuration(self):
        theta1, theta2 = 0.3, -1.1
        pose = self.fk.compute_forward_kinematics(JointState(theta1, theta2))
        self.assertAlmostEqual(pose.x, 0.5 * np.cos(theta1) + 0.3 * np.cos(theta1 + theta2))
        self.assertAlmostEqual(pose.y, 0.5 * np.sin(theta1) + 0.3 * np.sin(theta1 + theta2))

    def test_deterministic(self):
        """Repeated calls on the same state give identical poses."""
        state = JointState(0.7853981633974483, -2.356194490192345, 0.1, -0.2)
        first = self.fk.compute_forward_kinematics(state)
        second = self.fk.compute_forward_kinematics(state)
        self.assertEqual(first, second)
        self.assertEqual(first.x, second.x)
        self.assertEqual(first.y, second.y)

    def test_velocities_do_not_affect_pose(self):
        still = self.fk.compute_forward_kinematics(JointState(0.4, 0.2))
        moving = self.fk.compute_forward_kinematics(JointState(0.4, 0.2, 5.0, -5.0))
        self.assertEqual(still, moving)

    def test_trajectory_poses_preserve_order(self):
        states = [JointState(a, 0.0) for a in np.linspace(0.0, np.pi / 2, 6)]
        poses = self.fk.compute_trajectory_poses(states)

        self.assertEqual(len(poses), len(states))
        for state, pose in zip(states, poses):
            self.assertEqual(pose, self.fk.compute_forward_kinematics(state))
        self.assertAlmostEqual(poses[-1].y, 0.8, places=12)

    def test_compute_positions(self):
        states = [JointState(0.0, 0.0), JointState(np.pi / 2, 0.0)]
        positions = self.fk.compute_positions(states)
        self.assertEqual(positions.shape, (2, 2))
        np.testing.assert_allclose(positions, [[0.8, 0.0], [0.0, 0.8]], atol=1e-12)

        self.assertEqual(self.fk.compute_positions([]).shape, (0, 2))

    def test_workspace(self):
        self.assertAlmostEqual(self.fk.workspace_radius(), 0.8)
        self.assertTrue(self.fk.is_reachable(0.8, 0.0))
        self.assertTrue(self.fk.is_reachable(0.0, 0.5))
        self.assertTrue(self.fk.is_reachable(0.2, 0.0))
        self.assertFalse(self.fk.is_reachable(0.9, 0.0))
        self.assertFalse(self.fk.is_reachable(0.1, 0.0))

    def test_every_pose_is_reachable(self):
        for theta1, theta2 in [(0.1, 0.2), (-2.0, 1.5), (3.0, -3.0)]:
            pose = self.fk.compute_forward_kinematics(JointState(theta1, theta2))
            self.assertTrue(self.fk.is_reachable(pose.x, pose.y))

    def test_get_link_lengths(self):
        self.assertEqual(self.fk.get_link_lengths(), (0.5, 0.3))

    def test_invalid_link_lengths(self):
        for link1, link2 in [(0.0, 0.3), (0.5, -0.1), (float('inf'), 0.3), (0.5, float('nan'))]:
            with self.assertRaises(ForwardKinematicsError):
                ForwardKinematics(link1, link2)


class TestRobotTypes(unittest.TestCase):
    """Test cases for the state containers."""

    def test_joint_state_defaults(self):
        state = JointState(0.1, 0.2)
        self.assertEqual(state.dtheta1, 0.0)
        self.assertEqual(state.dtheta2, 0.0)

    def test_joint_state_arrays(self):
        state = JointState(0.1, 0.2, 0.3, 0.4)
        np.testing.assert_array_equal(state.angles(), [0.1, 0.2])
        np.testing.assert_array_equal(state.velocities(), [0.3, 0.4])
        np.testing.assert_array_equal(state.as_array(), [0.1, 0.2, 0.3, 0.4])

    def test_pose_is_frozen(self):
        pose = EndEffectorPose(0.3, 0.4)
        with self.assertRaises(Exception):
            pose.x = 1.0
        self.assertAlmostEqual(pose.distance_from_base(), 0.5)
        np.testing.assert_array_equal(pose.as_array(), [0.3, 0.4])


if __name__ == '__main__':
    unittest.main(verbosity=2)
