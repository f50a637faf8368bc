"""2D vector math with component-wise arithmetic."""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

import numpy as np

from .. import config, floatmath
from .formatting import format_magnitude

if TYPE_CHECKING:
    from .vector3d import Vector3D

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Vector2D:
    """Vector in 2D space.

    ``x`` is the coefficient of the i unit vector and ``y`` the coefficient of
    the j unit vector. ``*`` and ``/`` between vectors are component-wise;
    use :meth:`scale` for scalar multiplication.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def new(cls, x: float, y: float) -> "Vector2D":
        return cls(x, y)

    @classmethod
    def set(cls, value: float) -> "Vector2D":
        """Return a vector with both components equal to value."""
        return cls(value, value)

    @classmethod
    def i(cls) -> "Vector2D":
        return cls(1.0, 0.0)

    @classmethod
    def j(cls) -> "Vector2D":
        return cls(0.0, 1.0)

    @classmethod
    def origin(cls) -> "Vector2D":
        return cls(0.0, 0.0)

    @classmethod
    def select(cls, comp: str, value: float) -> Optional["Vector2D"]:
        """Return a vector with the labelled component set to value and the other zero.

        Valid labels are ``"i"``/``"x"`` and ``"j"``/``"y"``; anything else
        returns None.
        """
        if comp in ("i", "x"):
            return cls(value, 0.0)
        if comp in ("j", "y"):
            return cls(0.0, value)
        logger.debug("Unknown 2D component label %r", comp)
        return None

    @classmethod
    def from_numpy(cls, array) -> "Vector2D":
        values = np.asarray(array, dtype=np.float64)
        if values.shape != (2,):
            raise ValueError(f"Expected an array of shape (2,), got {values.shape}.")
        return cls(float(values[0]), float(values[1]))

    def copy(self) -> "Vector2D":
        return type(self)(self.x, self.y)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def abs(self) -> "Vector2D":
        return Vector2D(abs(self.x), abs(self.y))

    def scale(self, value: float) -> "Vector2D":
        return Vector2D(self.x * value, self.y * value)

    def scale_comps_by_comps(self, other: "Vector2D") -> "Vector2D":
        """Multiply x by other.x and y by other.y."""
        return Vector2D(self.x * other.x, self.y * other.y)

    def to_unit(self) -> None:
        """Scale this vector to unit length in place.

        The zero vector has no direction and is left unchanged.
        """
        mag = self.magnitude()
        if mag > 0.0:
            self.x /= mag
            self.y /= mag
        else:
            logger.debug("to_unit() on a zero-length vector left it unchanged")

    def normalized(self) -> Optional["Vector2D"]:
        """Return the unit vector in this direction, or None for the zero vector."""
        mag = self.magnitude()
        if mag > 0.0:
            return Vector2D(self.x / mag, self.y / mag)
        logger.debug("normalized() of a zero-length vector is undefined")
        return None

    def add_scaled(self, other: "Vector2D", value: float) -> "Vector2D":
        """Return self + other * value."""
        return self + other.scale(value)

    def scale_add(self, value: float, other: "Vector2D") -> "Vector2D":
        """Return self * value + other."""
        return self.scale(value) + other

    def is_equal_to(self, other: "Vector2D") -> bool:
        return self.x == other.x and self.y == other.y

    def is_greater_than(self, other: "Vector2D") -> bool:
        """True if this vector is strictly longer than other."""
        return self.squared_magnitude() > other.squared_magnitude()

    def comp_wise_gt(self, other: "Vector2D") -> bool:
        """True only if every component is strictly greater than its counterpart."""
        return self.x > other.x and self.y > other.y

    def as_cylindrical(self) -> "Vector2D":
        """Return (radius, angle) with angle = atan(y / x).

        The one-argument arctangent loses the quadrant: the angle is always in
        [-pi/2, pi/2]. x == 0 gives +-pi/2, or NaN at the origin.
        """
        return Vector2D(
            math.hypot(self.x, self.y),
            floatmath.atan_ratio(self.y, self.x),
        )

    def to_3d(self, z: float) -> "Vector3D":
        from .vector3d import Vector3D

        return Vector3D(self.x, self.y, z)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def magnitude_str(self, decimals: int = config.DEFAULT_MAGNITUDE_DECIMALS) -> str:
        return f"{self.magnitude():.{decimals}f}"

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __getitem__(self, index: int) -> float:
        index = operator.index(index)
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vector2D index out of range: {index!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.is_equal_to(other)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __isub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x * other.x, self.y * other.y)

    def __imul__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        return self

    def __truediv__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(floatmath.div(self.x, other.x), floatmath.div(self.y, other.y))

    def __itruediv__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        self.x = floatmath.div(self.x, other.x)
        self.y = floatmath.div(self.y, other.y)
        return self

    def __str__(self) -> str:
        return f"{self.x}i + {self.y}j"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format_magnitude(self.magnitude(), format_spec, type(self).__name__)
