"""Small immutable 2D and 3D vectors."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def mag(self) -> float:
        """Squared magnitude: the vector dotted with itself."""
        return self.dot(self)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, c: float) -> Vec2:
        if not isinstance(c, Real):
            return NotImplemented
        return Vec2(c * self.x, c * self.y)

    def __rmul__(self, c: float) -> Vec2:
        return self.__mul__(c)

    def proj(self, onto: Vec2) -> Vec2:
        """Project this vector onto ``onto``; a zero ``onto`` raises ZeroDivisionError."""
        return onto * (self.dot(onto) / onto.dot(onto))


@dataclass(frozen=True)
class Vec3:
    """A three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def mag(self) -> float:
        """Squared magnitude: the vector dotted with itself."""
        return self.dot(self)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, c: float) -> Vec3:
        if not isinstance(c, Real):
            return NotImplemented
        return Vec3(c * self.x, c * self.y, c * self.z)

    def __rmul__(self, c: float) -> Vec3:
        return self.__mul__(c)

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def proj(self, onto: Vec3) -> Vec3:
        """Project this vector onto ``onto``; a zero ``onto`` raises ZeroDivisionError."""
        return onto * (self.dot(onto) / onto.dot(onto))