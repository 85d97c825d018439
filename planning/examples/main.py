#!/usr/bin/env python3
"""
2-DOF Robot Arm Trajectory Pipeline

Demonstrates the complete joint-space pipeline on the default configuration
(config/pipeline.yaml):
1. Linear trajectory generation with finite-difference velocities
2. Joint velocity limit filtering
3. Forward kinematics of every filtered sample
4. Console report

Author: Robot Control Team
"""

import sys
import os
import logging

# Add project root to sys.path for imports
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from planning.src.pipeline_config import load_pipeline_config
from planning.src.trajectory_pipeline import TrajectoryPipeline
from planning.src.trajectory_report import render_report

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger('arm_pipeline')


def main() -> int:
    """Run the pipeline once and print the report to stdout."""
    try:
        config = load_pipeline_config()
        result = TrajectoryPipeline(config).run()
    except Exception as e:
        logger.error(f"Trajectory pipeline failed: {e}")
        raise

    sys.stdout.write(render_report(result, config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
