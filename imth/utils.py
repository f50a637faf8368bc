"""Physics helpers built on the constants table."""

from __future__ import annotations

from . import floatmath
from .constants import G


def gravitational_acceleration(mass: float, radius: float) -> float:
    """Surface gravitational acceleration (m s^-2) of a body of mass (kg) and radius (m).

    A zero radius gives inf.
    """
    return floatmath.div(G * mass, radius * radius)


def escape_velocity(mass: float, radius: float) -> float:
    """Escape velocity (m s^-1) from the surface of a body of mass (kg) and radius (m).

    See https://en.wikipedia.org/wiki/Escape_velocity
    """
    return floatmath.sqrt(floatmath.div(2.0 * G * mass, radius))
