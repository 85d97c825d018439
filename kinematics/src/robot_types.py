#!/usr/bin/env python3
"""
Robot State Types for the 2-DOF Planar Arm

Plain data containers shared by the kinematics and planning packages:
- JointState: joint angles and joint velocities of the two revolute joints
- EndEffectorPose: planar Cartesian position of the tool point

Author: Robot Control Team
"""

import numpy as np
from dataclasses import dataclass


@dataclass
class JointState:
    """Joint-space state of the 2-DOF arm."""
    theta1: float  # Joint 1 angle [rad]
    theta2: float  # Joint 2 angle [rad]
    dtheta1: float = 0.0  # Joint 1 velocity [rad/s]
    dtheta2: float = 0.0  # Joint 2 velocity [rad/s]

    def angles(self) -> np.ndarray:
        """Get joint angles as array [theta1, theta2]."""
        return np.array([self.theta1, self.theta2])

    def velocities(self) -> np.ndarray:
        """Get joint velocities as array [dtheta1, dtheta2]."""
        return np.array([self.dtheta1, self.dtheta2])

    def as_array(self) -> np.ndarray:
        """Get full state as array [theta1, theta2, dtheta1, dtheta2]."""
        return np.array([self.theta1, self.theta2, self.dtheta1, self.dtheta2])


@dataclass(frozen=True)
class EndEffectorPose:
    """Planar end-effector position in the base frame."""
    x: float  # [m]
    y: float  # [m]

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def distance_from_base(self) -> float:
        """Euclidean distance of the tool point from the base joint."""
        return float(np.hypot(self.x, self.y))
