"""Quaternion and dual-quaternion math, OBJ/MTL loading, parametric meshes, text tables and small utilities."""

__version__ = "0.1.0"