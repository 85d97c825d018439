#!/usr/bin/env python3
"""
Trajectory Planning Module

This module generates joint-space trajectories for the 2-DOF planar arm:
- Linear interpolation between a start and a goal joint configuration
- Finite-difference velocity estimate shared by every sample
- Resampling of a trajectory at arbitrary interpolation parameters
- Velocity limit validation

The velocity estimate is one global finite difference per trajectory,
(goal - start) / (N - 1), repeated on every sample. It is not re-derived from
adjacent samples.

Author: Robot Control Team
"""

import copy
import numpy as np
import logging
from typing import List, Dict, Any, Iterator, Optional, Sequence, Union
from dataclasses import dataclass, field
from scipy.interpolate import interp1d

from kinematics.src.robot_types import JointState

logger = logging.getLogger(__name__)

class TrajectoryPlanningError(Exception):
    """Custom exception for trajectory planning errors."""
    pass

@dataclass
class Trajectory:
    """Ordered joint-state samples from start (index 0) to goal (index N-1)."""
    points: List[JointState]
    alphas: np.ndarray = field(default_factory=lambda: np.zeros(0))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[JointState]:
        return iter(self.points)

    def __getitem__(self, index: int) -> JointState:
        return self.points[index]

    def __setitem__(self, index: int, state: JointState) -> None:
        self.points[index] = state

    def get_angles(self) -> np.ndarray:
        """Get joint angle array (n_points x 2)."""
        return np.array([p.angles() for p in self.points])

    def get_velocities(self) -> np.ndarray:
        """Get joint velocity array (n_points x 2)."""
        return np.array([p.velocities() for p in self.points])

    def copy(self) -> 'Trajectory':
        """Independent copy of the samples."""
        return Trajectory(points=copy.deepcopy(self.points), alphas=self.alphas.copy())

def _as_joint_state(config: Union[JointState, Sequence[float]]) -> JointState:
    if isinstance(config, JointState):
        return config
    theta1, theta2 = config
    return JointState(theta1=float(theta1), theta2=float(theta2))

def interpolate_linear(start: JointState, goal: JointState,
                       alpha: float, num_samples: int) -> JointState:
    """
    Linearly interpolate a joint state between start and goal.

    Args:
        start: Start joint configuration
        goal: Goal joint configuration
        alpha: Interpolation parameter, clamped to [0, 1]
        num_samples: Number of samples in the full trajectory (for the velocity estimate)

    Returns:
        Interpolated JointState with finite-difference velocities

    Raises:
        TrajectoryPlanningError: If num_samples < 2
    """
    if num_samples < 2:
        raise TrajectoryPlanningError(
            f"Need at least 2 samples for a trajectory, got {num_samples}"
        )

    alpha = float(np.clip(alpha, 0.0, 1.0))

    # Convex form keeps alpha=0 -> start and alpha=1 -> goal exact
    return JointState(
        theta1=(1.0 - alpha) * start.theta1 + alpha * goal.theta1,
        theta2=(1.0 - alpha) * start.theta2 + alpha * goal.theta2,
        dtheta1=(goal.theta1 - start.theta1) / (num_samples - 1),
        dtheta2=(goal.theta2 - start.theta2) / (num_samples - 1),
    )

class TrajectoryPlanner:
    """Joint-space trajectory generation for the 2-DOF arm."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize trajectory planner.

        Args:
            config: Trajectory planning configuration
        """
        # Default configuration
        self.config = {
            'num_samples': 21,  # includes both endpoints
            'max_joint_velocity': 1.0,  # rad/s
        }

        if config:
            self.config.update(config)

        logger.info(f"Trajectory planner initialized: {self.config['num_samples']} samples, "
                    f"velocity limit {self.config['max_joint_velocity']} rad/s")

    def plan_linear_trajectory(self, start: Union[JointState, Sequence[float]],
                               goal: Union[JointState, Sequence[float]],
                               num_samples: Optional[int] = None) -> Trajectory:
        """
        Plan a linear joint-space trajectory from start to goal.

        Args:
            start: Start configuration (JointState or (theta1, theta2))
            goal: Goal configuration (JointState or (theta1, theta2))
            num_samples: Number of samples including endpoints (default from config)

        Returns:
            Trajectory with num_samples points

        Raises:
            TrajectoryPlanningError: If num_samples < 2
        """
        n = self.config['num_samples'] if num_samples is None else num_samples
        if n != int(n):
            raise TrajectoryPlanningError(f"Sample count must be a whole number, got {n}")
        if n < 2:
            raise TrajectoryPlanningError(
                f"Need at least 2 samples for a trajectory, got {n}"
            )
        n = int(n)

        start_state = _as_joint_state(start)
        goal_state = _as_joint_state(goal)

        alphas = np.array([i / (n - 1) for i in range(n)])
        points = [interpolate_linear(start_state, goal_state, alpha, n) for alpha in alphas]

        logger.debug(f"Linear trajectory planned: {n} points, "
                     f"dθ=({points[0].dtheta1:.4f}, {points[0].dtheta2:.4f}) rad/s")

        return Trajectory(points=points, alphas=alphas)

    def interpolate_trajectory(self, trajectory: Trajectory,
                               query_alphas: Union[float, Sequence[float], np.ndarray]) -> Dict[str, np.ndarray]:
        """
        Interpolate trajectory at specified interpolation parameters.

        Args:
            trajectory: Input trajectory
            query_alphas: Parameters to interpolate at, clamped to [0, 1]

        Returns:
            Dictionary with interpolated angles and velocities

        Raises:
            TrajectoryPlanningError: If interpolation fails
        """
        try:
            if len(trajectory) < 2:
                raise ValueError("trajectory must hold at least 2 points")

            alphas = trajectory.alphas
            if len(alphas) != len(trajectory):
                alphas = np.linspace(0.0, 1.0, len(trajectory))

            query = np.clip(np.atleast_1d(np.asarray(query_alphas, dtype=float)), 0.0, 1.0)

            angle_interp = interp1d(alphas, trajectory.get_angles(), axis=0, kind='linear')
            vel_interp = interp1d(alphas, trajectory.get_velocities(), axis=0, kind='linear')

            return {
                'angles': angle_interp(query),
                'velocities': vel_interp(query),
                'alphas': query
            }

        except Exception as e:
            logger.error(f"Trajectory interpolation failed: {e}")
            raise TrajectoryPlanningError(f"Interpolation failed: {e}")

    def validate_trajectory_dynamics(self, trajectory: Trajectory,
                                     velocity_limit: Optional[float] = None) -> Dict[str, Any]:
        """Validate trajectory against the joint velocity limit."""
        vel_limit = self.config['max_joint_velocity'] if velocity_limit is None else velocity_limit

        velocities = np.abs(trajectory.get_velocities())
        violations = np.any(velocities > vel_limit, axis=1)
        max_vels = np.max(velocities, axis=0)

        return {
            'velocity_ok': not np.any(violations),
            'max_velocities': max_vels,
            'velocity_limit': vel_limit,
            'velocity_violations': violations,
            'violation_count': int(np.count_nonzero(violations))
        }

    def update_config(self, new_config: Dict[str, Any]):
        """Update trajectory planning configuration."""
        self.config.update(new_config)
        logger.info("Trajectory planner configuration updated")
