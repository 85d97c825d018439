#!/usr/bin/env python3
"""
Pipeline Configuration

Parameters of the trajectory pipeline (arm geometry, sampling, velocity limit,
start/goal configuration) and their YAML loader. Angles are stored in the YAML
file in degrees and converted to radians on load.

Author: Robot Control Team
"""

import os
import logging
import numpy as np
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

class PipelineConfigError(Exception):
    """Custom exception for invalid pipeline configuration."""
    pass

@dataclass
class PipelineConfig:
    """Trajectory pipeline parameters."""
    link1: float = 0.5  # [m]
    link2: float = 0.3  # [m]
    velocity_limit: float = 1.0  # [rad/s]
    num_samples: int = 21  # includes both endpoints
    start: Tuple[float, float] = (0.0, 0.0)  # [rad]
    goal: Tuple[float, float] = field(default_factory=lambda: (np.pi / 4.0, -np.pi))  # [rad]
    print_step: int = 5  # report every n-th sample

    def validate(self) -> None:
        """
        Check parameter ranges.

        Raises:
            PipelineConfigError: If any parameter is out of range
        """
        if int(self.num_samples) != self.num_samples or self.num_samples < 2:
            raise PipelineConfigError(
                f"num_samples must be an integer >= 2, got {self.num_samples}"
            )
        if self.link1 <= 0 or self.link2 <= 0:
            raise PipelineConfigError(
                f"Link lengths must be positive, got L1={self.link1}, L2={self.link2}"
            )
        if self.velocity_limit < 0:
            raise PipelineConfigError(
                f"velocity_limit must be >= 0, got {self.velocity_limit}"
            )
        if self.print_step < 1:
            raise PipelineConfigError(f"print_step must be >= 1, got {self.print_step}")
        if len(self.start) != 2 or len(self.goal) != 2:
            raise PipelineConfigError("start and goal must each hold two joint angles")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'link1': self.link1,
            'link2': self.link2,
            'velocity_limit': self.velocity_limit,
            'num_samples': self.num_samples,
            'start': tuple(self.start),
            'goal': tuple(self.goal),
            'print_step': self.print_step,
        }

def get_default_config_path() -> str:
    """Get default path to the pipeline configuration file."""
    possible_paths = [
        os.path.join(os.path.dirname(__file__), "..", "..", "config", "pipeline.yaml"),
        os.path.join(os.path.dirname(__file__), "..", "config", "pipeline.yaml"),
        os.path.join(os.path.dirname(__file__), "pipeline.yaml")
    ]

    for path in possible_paths:
        abs_path = os.path.abspath(path)
        if os.path.exists(abs_path):
            return abs_path

    # Return first path as default even if it doesn't exist
    return os.path.abspath(possible_paths[0])

def _read_angle_pair(section: Dict[str, Any], key: str, default: Tuple[float, float]) -> Tuple[float, float]:
    """Read a [deg, deg] pair from the joints section and convert to radians."""
    if key not in section:
        return default
    values = section[key]
    if not isinstance(values, (list, tuple)) or len(values) != 2:
        raise PipelineConfigError(f"joints.{key} must be a list of two angles in degrees")
    theta1, theta2 = np.deg2rad([float(v) for v in values])
    return float(theta1), float(theta2)

def _read_count(section: Dict[str, Any], key: str, default: int) -> int:
    """Read a whole-number parameter; fractional values are rejected, not truncated."""
    value = float(section.get(key, default))
    if not value.is_integer():
        raise PipelineConfigError(f"{key} must be a whole number, got {section[key]}")
    return int(value)

def config_from_dict(data: Dict[str, Any]) -> PipelineConfig:
    """
    Build a configuration from the parsed YAML structure.

    Missing sections or keys fall back to the defaults.
    """
    config = PipelineConfig()

    arm = data.get('arm', {}) or {}
    trajectory = data.get('trajectory', {}) or {}
    joints = data.get('joints', {}) or {}
    report = data.get('report', {}) or {}

    try:
        config.link1 = float(arm.get('link1', config.link1))
        config.link2 = float(arm.get('link2', config.link2))
        config.velocity_limit = float(trajectory.get('velocity_limit', config.velocity_limit))
        config.num_samples = _read_count(trajectory, 'num_samples', config.num_samples)
        config.print_step = _read_count(report, 'print_step', config.print_step)
    except (TypeError, ValueError) as e:
        raise PipelineConfigError(f"Invalid pipeline parameter: {e}")

    config.start = _read_angle_pair(joints, 'start_deg', config.start)
    config.goal = _read_angle_pair(joints, 'goal_deg', config.goal)

    return config

def load_pipeline_config(config_path: Optional[str] = None) -> PipelineConfig:
    """
    Load pipeline configuration from YAML.

    Args:
        config_path: Path to the YAML file (default: config/pipeline.yaml)

    Returns:
        Validated PipelineConfig

    Raises:
        PipelineConfigError: If the file cannot be parsed or holds invalid values
    """
    config_path = config_path or get_default_config_path()

    if not os.path.exists(config_path):
        logger.warning(f"Pipeline config not found: {config_path}, using defaults")
        config = PipelineConfig()
        config.validate()
        return config

    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load pipeline config from {config_path}: {e}")
        raise PipelineConfigError(f"Cannot read {config_path}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PipelineConfigError(f"{config_path} must contain a mapping at top level")

    config = config_from_dict(data)
    config.validate()

    logger.info(f"Pipeline config loaded from: {config_path}")
    return config
