#!/usr/bin/env python3
"""
Trajectory Pipeline

Runs the three stages once, in order:
1. Generate a linear joint-space trajectory
2. Apply the joint velocity limit filter in place
3. Map every filtered sample to its end-effector pose

Author: Robot Control Team
"""

import time
import logging
from dataclasses import dataclass
from typing import List, Optional

from kinematics.src.robot_types import EndEffectorPose
from kinematics.src.forward_kinematic import ForwardKinematics

try:
    from .pipeline_config import PipelineConfig
    from .trajectory_planner import Trajectory, TrajectoryPlanner
    from .trajectory_filter import filter_trajectory
except ImportError:
    from pipeline_config import PipelineConfig
    from trajectory_planner import Trajectory, TrajectoryPlanner
    from trajectory_filter import filter_trajectory

logger = logging.getLogger(__name__)

@dataclass
class PipelineResult:
    """Result container for one pipeline run."""
    unfiltered: Trajectory
    trajectory: Trajectory
    poses: List[EndEffectorPose]
    clamped_count: int
    computation_time: Optional[float] = None

class TrajectoryPipeline:
    """Generator -> velocity filter -> forward kinematics, executed once per run."""

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig()
        self.config.validate()

        self.planner = TrajectoryPlanner({
            'num_samples': self.config.num_samples,
            'max_joint_velocity': self.config.velocity_limit,
        })
        self.fk = ForwardKinematics(self.config.link1, self.config.link2)

    def run(self) -> PipelineResult:
        start_time = time.time()

        trajectory = self.planner.plan_linear_trajectory(self.config.start, self.config.goal)
        unfiltered = trajectory.copy()

        clamped_count = filter_trajectory(trajectory, self.config.velocity_limit)

        poses = self.fk.compute_trajectory_poses(trajectory)

        elapsed = time.time() - start_time
        logger.info(f"Pipeline finished: {len(trajectory)} states, "
                    f"{clamped_count} clamped, {elapsed * 1000:.2f} ms")

        return PipelineResult(
            unfiltered=unfiltered,
            trajectory=trajectory,
            poses=poses,
            clamped_count=clamped_count,
            computation_time=elapsed
        )
