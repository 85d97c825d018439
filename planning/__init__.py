"""Motion planning package for the 2-DOF planar arm."""
