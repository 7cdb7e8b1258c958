"""Quaternions over the reals and a coarse closeness test."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


def near(u, v, e=-6):
    """Return True if the squared difference of u and v is at most 2**(e+1)."""
    return (u - v) * (u - v) <= 2.0 ** (e + 1)


def _as_quat(value):
    """Promote a real number to a quaternion; return None for other types."""
    if isinstance(value, Quat):
        return value
    if isinstance(value, Real):
        return Quat(value)
    return None


@dataclass(frozen=True, eq=False)
class Quat:
    """A quaternion w + xi + yj + zk."""

    w: float
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield from (self.w, self.x, self.y, self.z)

    def __neg__(self) -> Quat:
        return Quat(-self.w, -self.x, -self.y, -self.z)

    def __invert__(self) -> Quat:
        """Conjugate."""
        return Quat(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quat:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        return ~self / self.norm_squared()

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.norm_squared())

    def norm_squared(self) -> float:
        """Squared Euclidean norm."""
        return self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z

    def __eq__(self, other) -> bool:
        other_quat = _as_quat(other)
        if other_quat is None:
            return NotImplemented
        return tuple(self) == tuple(other_quat)

    def __hash__(self) -> int:
        if self.x == 0 and self.y == 0 and self.z == 0:
            return hash(self.w)
        return hash(tuple(self))

    def __add__(self, other) -> Quat:
        other_quat = _as_quat(other)
        if other_quat is None:
            return NotImplemented
        return Quat(*(a + b for a, b in zip(self, other_quat)))

    def __sub__(self, other) -> Quat:
        other_quat = _as_quat(other)
        if other_quat is None:
            return NotImplemented
        return Quat(*(a - b for a, b in zip(self, other_quat)))

    def __mul__(self, other) -> Quat:
        if isinstance(other, Real):
            return Quat(*(a * other for a in self))
        if not isinstance(other, Quat):
            return NotImplemented
        lw, lx, ly, lz = self
        rw, rx, ry, rz = other
        return Quat(
            lw * rw - lx * rx - ly * ry - lz * rz,
            lw * rx + lx * rw + ly * rz - lz * ry,
            lw * ry - lx * rz + ly * rw + lz * rx,
            lw * rz + lx * ry - ly * rx + lz * rw,
        )

    def __rmul__(self, other) -> Quat:
        if isinstance(other, Real):
            return Quat(*(other * a for a in self))
        return NotImplemented

    def __truediv__(self, other) -> Quat:
        if isinstance(other, Real):
            return Quat(*(a / other for a in self))
        return NotImplemented

    def apply(self, other):
        """Return self * other * ~self."""
        return self * other * ~self

    def __str__(self) -> str:
        if self == Quat(self.w):
            return f"{self.w:g}"
        return ", ".join(f"{value:g}" for value in self)