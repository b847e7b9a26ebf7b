"""Three-component vectors used for positions, directions and offsets."""

from __future__ import annotations

import math
from dataclasses import dataclass


def signum(value: float) -> float:
    """Return -1.0, 0.0 or 1.0 according to the sign of ``value``."""
    if value < 0:
        return -1.0
    if value > 0:
        return 1.0
    return 0.0


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector; also used for coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Vec3:
        """Return the unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self / self.magnitude()

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, divisor: float) -> Vec3:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vec3(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)