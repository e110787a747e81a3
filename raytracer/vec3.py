"""
Vector3 class for 3D math operations.

The one value type of the ray tracer, used for:
- Points in 3D space
- Direction vectors
- RGB color values

Every operation returns a new Vec3; instances are never mutated.
"""

from __future__ import annotations
from numbers import Real
from typing import Union
import numpy as np


class Vec3:
    """An immutable 3D vector backed by a read-only numpy array."""

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        data = np.array([x, y, z], dtype=np.float64)
        data.flags.writeable = False
        self._data = data

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from a length-3 array (the array is copied)."""
        v = cls.__new__(cls)
        data = np.array(arr, dtype=np.float64)
        data.flags.writeable = False
        v._data = data
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    # Equality is approximate, so vectors are not hashable
    __hash__ = None

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data + other._data)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data - other._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data * other._data)
        if not isinstance(other, Real):
            return NotImplemented
        return Vec3.from_array(self._data * other)

    def __rmul__(self, other: float) -> Vec3:
        if not isinstance(other, Real):
            return NotImplemented
        return Vec3.from_array(other * self._data)

    def __truediv__(self, other: float) -> Vec3:
        # t == 0 yields inf/nan components rather than raising
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vec3.from_array(self._data / np.float64(other))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return float(np.sqrt(self.length_squared()))

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        """Compute cross product with another vector."""
        u, v = self._data, other._data
        return Vec3(
            u[1] * v[2] - u[2] * v[1],
            u[2] * v[0] - u[0] * v[2],
            u[0] * v[1] - u[1] * v[0],
        )

    def unit_vector(self) -> Vec3:
        """Return a unit vector in the same direction.

        The zero vector has no direction; its unit vector is all NaN.
        """
        return self / self.length()

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


def dot(u: Vec3, v: Vec3) -> float:
    return u.dot(v)


def cross(u: Vec3, v: Vec3) -> Vec3:
    return u.cross(v)


def unit_vector(v: Vec3) -> Vec3:
    return v.unit_vector()


# Convenience type aliases
Point3 = Vec3
Color = Vec3
