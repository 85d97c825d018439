#!/usr/bin/env python3
"""
Forward Kinematics Module for 2-DOF Planar Robot Arm

This module implements closed-form forward kinematics for a serial arm with
two revolute joints moving in the XY plane. Given joint angles it computes the
tool point position:

    x = L1·cos(θ1) + L2·cos(θ1 + θ2)
    y = L1·sin(θ1) + L2·sin(θ1 + θ2)

Key Features:
- Pure, stateless pose computation per joint state
- Order-preserving batch mapping over a trajectory
- Workspace (reachability) checking

Author: Robot Control Team
"""

import numpy as np
import logging
from typing import Iterable, List, Tuple

try:
    from .robot_types import JointState, EndEffectorPose
except ImportError:
    from robot_types import JointState, EndEffectorPose

logger = logging.getLogger(__name__)

class ForwardKinematicsError(Exception):
    """Custom exception for forward kinematics errors."""
    pass

class ForwardKinematics:
    """Closed-form forward kinematics for a two-link planar arm."""

    def __init__(self, link1: float = 0.5, link2: float = 0.3):
        """
        Initialize forward kinematics with the arm geometry.

        Args:
            link1: Length of link 1 in meters
            link2: Length of link 2 in meters

        Raises:
            ForwardKinematicsError: If a link length is not a positive finite number
        """
        for name, length in (('link1', link1), ('link2', link2)):
            if not np.isfinite(length) or length <= 0:
                raise ForwardKinematicsError(
                    f"{name} must be a positive finite length, got {length}"
                )

        self.link1 = float(link1)
        self.link2 = float(link2)

        logger.info(f"Forward kinematics initialized: L1={self.link1} m, L2={self.link2} m")

    def compute_forward_kinematics(self, state: JointState) -> EndEffectorPose:
        """
        Compute end-effector position for a single joint state.

        Velocities in the state are ignored.

        Args:
            state: Joint state (angles in radians)

        Returns:
            EndEffectorPose in meters
        """
        theta12 = state.theta1 + state.theta2
        x = self.link1 * np.cos(state.theta1) + self.link2 * np.cos(theta12)
        y = self.link1 * np.sin(state.theta1) + self.link2 * np.sin(theta12)
        return EndEffectorPose(x=float(x), y=float(y))

    def compute_trajectory_poses(self, states: Iterable[JointState]) -> List[EndEffectorPose]:
        """
        Map every joint state of a trajectory to its end-effector pose.

        Args:
            states: Ordered joint states (a Trajectory or any iterable)

        Returns:
            List of poses, parallel to the input order
        """
        poses = [self.compute_forward_kinematics(state) for state in states]
        logger.debug(f"Computed {len(poses)} end-effector poses")
        return poses

    def compute_positions(self, states: Iterable[JointState]) -> np.ndarray:
        """Get end-effector positions as array (n_states x 2)."""
        poses = self.compute_trajectory_poses(states)
        if not poses:
            return np.zeros((0, 2))
        return np.array([pose.as_array() for pose in poses])

    def workspace_radius(self) -> float:
        """Maximum reach of the arm (fully stretched)."""
        return self.link1 + self.link2

    def is_reachable(self, x: float, y: float) -> bool:
        """
        Check whether a planar point lies inside the arm workspace.

        The workspace of a two-link arm with unlimited joints is the annulus
        |L1 - L2| <= r <= L1 + L2.
        """
        r = np.hypot(x, y)
        inner = abs(self.link1 - self.link2)
        return bool(inner - 1e-12 <= r <= self.workspace_radius() + 1e-12)

    def get_link_lengths(self) -> Tuple[float, float]:
        """Get link lengths (L1, L2)."""
        return self.link1, self.link2
