"""Vector math and physics helpers for statics and dynamics problems."""

from . import constants
from .utils import escape_velocity, gravitational_acceleration
from .vectors import Vector2D, Vector3D

__version__ = "0.1.0"

__all__ = [
    "Vector2D",
    "Vector3D",
    "constants",
    "escape_velocity",
    "gravitational_acceleration",
]
