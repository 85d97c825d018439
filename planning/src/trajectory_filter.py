#!/usr/bin/env python3
"""
Trajectory Filter Module

Applies a per-sample transformation to a trajectory in place. The shipped
transformation is a joint velocity limit: each velocity component is clamped
independently to [-limit, +limit] and the number of altered samples is counted.

Author: Robot Control Team
"""

import numpy as np
import logging
from dataclasses import replace
from typing import Callable, List, Union

from kinematics.src.robot_types import JointState

try:
    from .trajectory_planner import Trajectory
except ImportError:
    from trajectory_planner import Trajectory

logger = logging.getLogger(__name__)

StateTransform = Callable[[JointState], JointState]

class TrajectoryFilterError(Exception):
    """Custom exception for trajectory filtering errors."""
    pass

def apply_filter(trajectory: Union[Trajectory, List[JointState]],
                 transform: StateTransform) -> None:
    """
    Replace every sample of the trajectory with transform(sample).

    Order and length are preserved. Samples are written back only after every
    transform result has been checked, so a failing transform leaves the
    trajectory unchanged.

    Args:
        trajectory: Trajectory (or list of JointState) modified in place
        transform: Function mapping a JointState to a JointState

    Raises:
        TrajectoryFilterError: If the transform does not return a JointState
    """
    results = []
    for i in range(len(trajectory)):
        result = transform(trajectory[i])
        if not isinstance(result, JointState):
            raise TrajectoryFilterError(
                f"Filter must return JointState, got {type(result).__name__} at index {i}"
            )
        results.append(result)

    for i, result in enumerate(results):
        trajectory[i] = result

class VelocityLimitFilter:
    """Clamp joint velocities to a symmetric limit and count altered samples."""

    def __init__(self, limit: float):
        """
        Args:
            limit: Maximum absolute joint velocity [rad/s]
        """
        if limit < 0:
            raise TrajectoryFilterError(f"Velocity limit must be >= 0, got {limit}")
        self.limit = float(limit)
        self.clamped_count = 0

    def __call__(self, state: JointState) -> JointState:
        dtheta1 = float(np.clip(state.dtheta1, -self.limit, self.limit))
        dtheta2 = float(np.clip(state.dtheta2, -self.limit, self.limit))

        if dtheta1 != state.dtheta1 or dtheta2 != state.dtheta2:
            self.clamped_count += 1

        return replace(state, dtheta1=dtheta1, dtheta2=dtheta2)

    def reset(self):
        """Reset the clamped sample counter."""
        self.clamped_count = 0

def filter_trajectory(trajectory: Union[Trajectory, List[JointState]], limit: float) -> int:
    """
    Apply a velocity limit to the trajectory in place.

    Returns:
        Number of samples with at least one clamped velocity component
    """
    velocity_filter = VelocityLimitFilter(limit)
    apply_filter(trajectory, velocity_filter)

    if velocity_filter.clamped_count:
        logger.warning(f"{velocity_filter.clamped_count} of {len(trajectory)} samples "
                       f"clamped to |dθ| <= {limit} rad/s")
    else:
        logger.debug(f"All {len(trajectory)} samples within |dθ| <= {limit} rad/s")

    return velocity_filter.clamped_count
