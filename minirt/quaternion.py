"""Unit quaternions for rotating scene geometry into camera space."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.vector import Vec3

_NEGATIVE_Z = Vec3(0.0, 0.0, -1.0)


@dataclass(frozen=True)
class Quaternion:
    """A quaternion ``w + xi + yj + zk``."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def normalized(self) -> Quaternion:
        """Return this quaternion scaled to unit length.

        Raises ZeroDivisionError for the zero quaternion.
        """
        length = math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)
        return Quaternion(
            self.w / length, self.x / length, self.y / length, self.z / length
        )

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        )

    def rotate(self, vec: Vec3) -> Vec3:
        """Rotate ``vec`` by this quaternion (q * v * q')."""
        result = self * Quaternion(0.0, vec.x, vec.y, vec.z) * self.conjugate()
        return Vec3(result.x, result.y, result.z)


def rotation_to_negative_z(direction: Vec3) -> Quaternion:
    """Return the rotation that turns unit ``direction`` onto (0, 0, -1).

    Raises ZeroDivisionError when ``direction`` points exactly along +z.
    """
    axis = direction.cross(_NEGATIVE_Z)
    return Quaternion(
        1.0 + direction.dot(_NEGATIVE_Z), axis.x, axis.y, axis.z
    ).normalized()