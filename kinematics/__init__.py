"""Kinematics package for the 2-DOF planar arm."""
