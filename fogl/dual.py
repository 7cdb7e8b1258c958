"""Dual quaternions u + v*E with E*E = 0."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from fogl.quat import Quat, near

_LABELS = ("1", "i", "j", "k", "E", "iE", "jE", "kE")


def _to_quat(value) -> Quat:
    if isinstance(value, Quat):
        return value
    if isinstance(value, Real):
        return Quat(value)
    raise TypeError(f"cannot use {type(value).__name__} as a quaternion")


def _as_dual(value):
    if isinstance(value, Dual):
        return value
    if isinstance(value, (Quat, Real)):
        return Dual(value)
    return None


@dataclass(frozen=True, eq=False)
class Dual:
    """A dual quaternion with real part u and dual part v."""

    u: Quat
    v: Quat = Quat(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "u", _to_quat(self.u))
        object.__setattr__(self, "v", _to_quat(self.v))

    def __neg__(self) -> Dual:
        return Dual(-self.u, -self.v)

    def __invert__(self) -> Dual:
        """Conjugate of both parts, with the dual scalar negated."""
        v = self.v
        return Dual(~self.u, Quat(-v.w, v.x, v.y, v.z))

    def inverse(self) -> Dual:
        """The conjugate divided by the squared norm."""
        conj = ~self
        return conj / conj.norm_squared()

    def norm(self) -> float:
        """Euclidean norm over all eight components."""
        return math.sqrt(self.norm_squared())

    def norm_squared(self) -> float:
        """Squared Euclidean norm over all eight components."""
        return self.u.norm_squared() + self.v.norm_squared()

    def __eq__(self, other) -> bool:
        other_dual = _as_dual(other)
        if other_dual is None:
            return NotImplemented
        return self.u == other_dual.u and self.v == other_dual.v

    def __hash__(self) -> int:
        if self.v == 0:
            return hash(self.u)
        return hash((tuple(self.u), tuple(self.v)))

    def __add__(self, other) -> Dual:
        other_dual = _as_dual(other)
        if other_dual is None:
            return NotImplemented
        return Dual(self.u + other_dual.u, self.v + other_dual.v)

    def __radd__(self, other) -> Dual:
        return self + other

    def __sub__(self, other) -> Dual:
        other_dual = _as_dual(other)
        if other_dual is None:
            return NotImplemented
        return Dual(self.u - other_dual.u, self.v - other_dual.v)

    def __mul__(self, other) -> Dual:
        if isinstance(other, Real):
            return Dual(self.u * other, self.v * other)
        other_dual = _as_dual(other)
        if other_dual is None:
            return NotImplemented
        p, q = other_dual.u, other_dual.v
        return Dual(self.u * p, self.v * p + self.u * q)

    def __rmul__(self, other) -> Dual:
        if isinstance(other, Real):
            return Dual(other * self.u, other * self.v)
        if isinstance(other, Quat):
            return Dual(other) * self
        return NotImplemented

    def __truediv__(self, other) -> Dual:
        if isinstance(other, Real):
            return Dual(self.u / other, self.v / other)
        return NotImplemented

    def apply(self, other) -> Dual:
        """Return self * other * ~self."""
        return self * other * ~self

    def __str__(self) -> str:
        parts = []
        components = (*self.u, *self.v)
        for index, (label, value) in enumerate(zip(_LABELS, components)):
            magnitude = abs(value)
            if near(magnitude, 0):
                continue
            positive = value > 0
            unit = near(magnitude, 1)
            if parts:
                sign = " + " if positive else " - "
            else:
                sign = "" if positive else "-"
            number = "" if unit else f"{magnitude:g}"
            suffix = label if index or unit else ""
            parts.append(sign + number + suffix)
        return "".join(parts) or "0"