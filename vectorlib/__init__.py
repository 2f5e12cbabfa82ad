"""
vectorlib - minimal 3D vector math.

Exports:
- Vector3: immutable float32 3-vector with arithmetic, geometry and rotations
- proj: projection of one vector onto another
"""

from .vector import Vector3, proj

__all__ = ["Vector3", "proj"]
