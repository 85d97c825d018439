#!/usr/bin/env python3
"""
Robot Motion Planning Package

Joint-space trajectory pipeline for a 2-DOF planar robot arm, built on top of
the kinematics package.

This package provides:
- Linear trajectory generation with finite-difference velocities
- In-place trajectory filtering (joint velocity limit)
- Pipeline configuration loaded from YAML
- Pipeline driver and console report

Author: Robot Control Team
Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "Robot Control Team"

from .pipeline_config import PipelineConfig, PipelineConfigError, load_pipeline_config
from .trajectory_planner import (
    Trajectory, TrajectoryPlanner, TrajectoryPlanningError, interpolate_linear
)
from .trajectory_filter import (
    VelocityLimitFilter, TrajectoryFilterError, apply_filter, filter_trajectory
)
from .trajectory_pipeline import TrajectoryPipeline, PipelineResult
from .trajectory_report import render_report, format_joint_state, format_pose

# Export all public classes
__all__ = [
    'PipelineConfig',
    'PipelineConfigError',
    'load_pipeline_config',
    'Trajectory',
    'TrajectoryPlanner',
    'TrajectoryPlanningError',
    'interpolate_linear',
    'VelocityLimitFilter',
    'TrajectoryFilterError',
    'apply_filter',
    'filter_trajectory',
    'TrajectoryPipeline',
    'PipelineResult',
    'render_report',
    'format_joint_state',
    'format_pose',
]

# Package metadata
__title__ = "robot_planning"
__description__ = "Trajectory generation and filtering for a 2-DOF planar robot arm"
__license__ = "MIT"
