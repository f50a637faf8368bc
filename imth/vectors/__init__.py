"""2D and 3D vector types."""

from .vector2d import Vector2D
from .vector3d import Vector3D

__all__ = [
    "Vector2D",
    "Vector3D",
]
