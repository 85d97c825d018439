#!/usr/bin/env python3
"""
Setup script for the 2-DOF Arm Trajectory Package
"""

from setuptools import setup, find_packages

setup(
    name="two_link_arm_trajectory",
    version="1.0.0",
    description="Trajectory interpolation, velocity limiting and forward kinematics for a 2-DOF planar arm",
    author="Thorn",
    packages=find_packages(exclude=["*.tests", "*.examples"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
        "scipy>=1.5.0",
        "PyYAML>=5.1",
    ],
    extras_require={
        "test": ["pytest>=6.0"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
