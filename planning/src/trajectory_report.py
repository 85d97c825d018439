#!/usr/bin/env python3
"""
Console report for the trajectory pipeline.

Author: Robot Control Team
"""

from typing import List, Sequence

from kinematics.src.robot_types import JointState, EndEffectorPose

try:
    from .pipeline_config import PipelineConfig
    from .trajectory_pipeline import PipelineResult
except ImportError:
    from pipeline_config import PipelineConfig
    from trajectory_pipeline import PipelineResult

def format_joint_state(state: JointState) -> str:
    return (f"θ1 = {state.theta1:.4f} rad | "
            f"θ2 = {state.theta2:.4f} rad | "
            f"dθ1 = {state.dtheta1:.4f} rad/s | "
            f"dθ2 = {state.dtheta2:.4f} rad/s")

def format_pose(pose: EndEffectorPose) -> str:
    return f"x = {pose.x:.4f} m,  y = {pose.y:.4f} m"

def _every_nth(items: Sequence, step: int, formatter) -> List[str]:
    return [f"[{i}]  {formatter(items[i])}" for i in range(0, len(items), step)]

def render_report(result: PipelineResult, config: PipelineConfig) -> str:
    """
    Render the human-readable pipeline report.

    Samples and poses are listed every config.print_step entries.
    """
    step = config.print_step
    limit = config.velocity_limit
    start, goal = config.start, config.goal

    lines = ["=== Robot Kinematics & Control ===", ""]
    lines.append(f"Start   ->   θ1 = {start[0]:.4f} rad, θ2 = {start[1]:.4f} rad")
    lines.append(f"Goal    ->   θ1 = {goal[0]:.4f} rad, θ2 = {goal[1]:.4f} rad")
    lines.append("")

    lines.append(f"Trajectory Points: {len(result.unfiltered)}")
    lines.append("")
    lines.append(f"Unfiltered Trajectory (Every {step} Points Shown):")
    lines.extend(_every_nth(result.unfiltered, step, format_joint_state))
    lines.append("")

    lines.append(f"Applying velocity-limit filter: |dθ| ≤ {limit:.1f} rad/s")
    if result.clamped_count == 0:
        lines.append("  -> Filter applied successfully, all values within limits.")
    else:
        lines.append(f"  -> Filter applied successfully, {result.clamped_count} "
                     f"points clamped to dθ limits")
    lines.append("")
    lines.extend(_every_nth(result.trajectory, step, format_joint_state))
    lines.append("")

    lines.append("Computing end-effector poses for filtered trajectory...")
    lines.append(f"Link Lengths: L1 = {config.link1:.4f} m, L2 = {config.link2:.4f} m")
    lines.append("")
    lines.extend(_every_nth(result.poses, step, format_pose))
    lines.append("")

    lines.append("Summary:")
    lines.append("-------------")
    lines.append(f"- Total Joint States : {len(result.poses)}")
    lines.append(f"- Clamped Samples    : {result.clamped_count}")
    lines.append(f"- Velocity filter: active (|dθ| ≤ {limit:.4f})")

    return "\n".join(lines) + "\n"
