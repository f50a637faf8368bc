"""3D vector math with component-wise arithmetic and vector products."""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from .. import config, floatmath
from .formatting import format_magnitude
from .vector2d import Vector2D

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Vector3D:
    """Vector in 3D space.

    ``x``, ``y`` and ``z`` are the coefficients of the i, j and k unit
    vectors. ``*`` and ``/`` between vectors are component-wise; use
    :meth:`scale` for scalar multiplication and :meth:`cross` for the vector
    product.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Vector3D":
        return cls(x, y, z)

    @classmethod
    def set(cls, value: float) -> "Vector3D":
        """Return a vector with all three components equal to value."""
        return cls(value, value, value)

    @classmethod
    def i(cls) -> "Vector3D":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def j(cls) -> "Vector3D":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def k(cls) -> "Vector3D":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def origin(cls) -> "Vector3D":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def select(cls, comp: str, value: float) -> Optional["Vector3D"]:
        """Return a vector with the labelled component set to value and the others zero.

        Valid labels are ``"i"``/``"x"``, ``"j"``/``"y"`` and ``"k"``/``"z"``;
        anything else returns None.
        """
        if comp in ("i", "x"):
            return cls(value, 0.0, 0.0)
        if comp in ("j", "y"):
            return cls(0.0, value, 0.0)
        if comp in ("k", "z"):
            return cls(0.0, 0.0, value)
        logger.debug("Unknown 3D component label %r", comp)
        return None

    @classmethod
    def from_numpy(cls, array) -> "Vector3D":
        values = np.asarray(array, dtype=np.float64)
        if values.shape != (3,):
            raise ValueError(f"Expected an array of shape (3,), got {values.shape}.")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def copy(self) -> "Vector3D":
        return type(self)(self.x, self.y, self.z)

    def dot(self, other: "Vector3D") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3D") -> "Vector3D":
        """Right-handed cross product self x other."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def triple_scalar_prod(self, oth_1: "Vector3D", oth_2: "Vector3D") -> float:
        """Return self . (oth_1 x oth_2), the signed volume spanned by the three vectors."""
        return (
            self.x * (oth_1.y * oth_2.z - oth_1.z * oth_2.y)
            + self.y * (oth_1.z * oth_2.x - oth_1.x * oth_2.z)
            + self.z * (oth_1.x * oth_2.y - oth_1.y * oth_2.x)
        )

    def triple_vector_prod(self, oth_1: "Vector3D", oth_2: "Vector3D") -> "Vector3D":
        """Return self x (oth_1 x oth_2)."""
        return self.cross(oth_1.cross(oth_2))

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def abs(self) -> "Vector3D":
        return Vector3D(abs(self.x), abs(self.y), abs(self.z))

    def scale(self, value: float) -> "Vector3D":
        return Vector3D(self.x * value, self.y * value, self.z * value)

    def scale_comps_by_comps(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x * other.x, self.y * other.y, self.z * other.z)

    def to_unit(self) -> None:
        """Scale this vector to unit length in place; the zero vector is left unchanged."""
        mag = self.magnitude()
        if mag > 0.0:
            self.x /= mag
            self.y /= mag
            self.z /= mag
        else:
            logger.debug("to_unit() on a zero-length vector left it unchanged")

    def normalized(self) -> Optional["Vector3D"]:
        """Return the unit vector in this direction, or None for the zero vector."""
        mag = self.magnitude()
        if mag > 0.0:
            return Vector3D(self.x / mag, self.y / mag, self.z / mag)
        logger.debug("normalized() of a zero-length vector is undefined")
        return None

    def add_scaled(self, other: "Vector3D", value: float) -> "Vector3D":
        return self + other.scale(value)

    def scale_add(self, value: float, other: "Vector3D") -> "Vector3D":
        return self.scale(value) + other

    def to_2d(self) -> Vector2D:
        """Drop the z component."""
        return Vector2D(self.x, self.y)

    def is_equal_to(self, other: "Vector3D") -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def is_greater_than(self, other: "Vector3D") -> bool:
        return self.squared_magnitude() > other.squared_magnitude()

    def comp_wise_gt(self, other: "Vector3D") -> bool:
        return self.x > other.x and self.y > other.y and self.z > other.z

    def as_cylindrical(self) -> None:
        """Convert in place to (radius, angle, z).

        Both new values are computed from the original x and y. The angle is
        atan(y / x), so it is always in [-pi/2, pi/2].
        """
        x, y = self.x, self.y
        self.x = math.hypot(x, y)
        self.y = floatmath.atan_ratio(y, x)

    def as_spherical(self) -> None:
        """Convert in place to (r, polar angle, azimuth).

        r is the magnitude, the polar angle is acos(z / r) measured from +z and
        the azimuth is atan2(y, x). The zero vector becomes (0, NaN, 0).
        """
        x, y, z = self.x, self.y, self.z
        r = self.magnitude()
        self.x = r
        self.y = floatmath.acos(floatmath.div(z, r))
        self.z = math.atan2(y, x)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def magnitude_str(self, decimals: int = config.DEFAULT_MAGNITUDE_DECIMALS) -> str:
        return f"{self.magnitude():.{decimals}f}"

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index: int) -> float:
        index = operator.index(index)
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"Vector3D index out of range: {index!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.is_equal_to(other)

    def __add__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __isub__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mul__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x * other.x, self.y * other.y, self.z * other.z)

    def __imul__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z
        return self

    def __truediv__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(
            floatmath.div(self.x, other.x),
            floatmath.div(self.y, other.y),
            floatmath.div(self.z, other.z),
        )

    def __itruediv__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.x = floatmath.div(self.x, other.x)
        self.y = floatmath.div(self.y, other.y)
        self.z = floatmath.div(self.z, other.z)
        return self

    def __str__(self) -> str:
        return f"{self.x}i + {self.y}j + {self.z}k"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format_magnitude(self.magnitude(), format_spec, type(self).__name__)
