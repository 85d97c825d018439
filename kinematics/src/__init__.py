#!/usr/bin/env python3
"""
Robot Kinematics Package - Source Module

Kinematics foundation for a 2-DOF planar robot arm.

This package provides:
- Joint state and end-effector pose types
- Closed-form forward kinematics
- Workspace reachability checks

Author: Robot Control Team
Version: 2.0.0
"""

__version__ = "2.0.0"
__author__ = "Robot Control Team"

# Core kinematics classes
from .robot_types import JointState, EndEffectorPose
from .forward_kinematic import ForwardKinematics, ForwardKinematicsError

# Package metadata
__title__ = "robot_kinematics"
__description__ = "Forward kinematics for a 2-DOF planar robot arm"
__license__ = "MIT"
