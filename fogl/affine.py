"""Points, directions, rotations and pivots built on dual quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from fogl.dual import Dual
from fogl.quat import Quat


def transpose(src, width, height):
    """Transpose a flat width*height matrix into a new list."""
    src = list(src)
    if len(src) != width * height:
        raise ValueError(
            f"expected {width * height} elements, got {len(src)}"
        )
    return [
        src[col * height + row]
        for row in range(height)
        for col in range(width)
    ]


@dataclass(frozen=True)
class Point:
    """A Cartesian point (x, y, z)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar) -> Point:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar) -> Point:
        return self * scalar

    def to_dual(self) -> Dual:
        return Dual(Quat(1), Quat(0, self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"{{{self.x:g}, {self.y:g}, {self.z:g}}}"


@dataclass(frozen=True)
class Unit:
    """A direction (x, y, z)."""

    x: float
    y: float
    z: float

    def to_dual(self) -> Dual:
        return Dual(Quat(1), Quat(0, self.x / 2, self.y / 2, self.z / 2))

    def __str__(self) -> str:
        return f"<{self.x:g}, {self.y:g}, {self.z:g}>"


def _as_unit(value) -> Unit:
    return value if isinstance(value, Unit) else Unit(*value)


@dataclass(frozen=True)
class Ray:
    """A translation of length r along a direction."""

    r: float
    direction: Unit

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", _as_unit(self.direction))

    def to_dual(self) -> Dual:
        n = self.direction
        half = self.r / 2
        return Dual(Quat(1), Quat(0, half * n.x * 1.0 if False else self.r * n.x / 2,
                                  self.r * n.y / 2, self.r * n.z / 2))

    def __str__(self) -> str:
        return f"{self.r:g} * {self.direction}"


@dataclass(frozen=True)
class Rotor:
    """A rotation by theta about an axis."""

    theta: float
    axis: Unit

    def __post_init__(self) -> None:
        object.__setattr__(self, "axis", _as_unit(self.axis))

    def to_quat(self) -> Quat:
        half = self.theta / 2
        s = math.sin(half)
        n = self.axis
        return Quat(math.cos(half), s * n.x, s * n.y, s * n.z)

    def to_dual(self) -> Dual:
        return Dual(self.to_quat(), 0)

    def __str__(self) -> str:
        return f"{self.theta / math.pi:g}pi; {self.axis}"


@dataclass(frozen=True)
class Pivot:
    """A rotation about an offset centre."""

    offset: Ray
    rotation: Rotor

    def to_dual(self) -> Dual:
        return (~self.offset.to_dual()).apply(self.rotation.to_quat())

    def __str__(self) -> str:
        return f"Pivot: {{{self.rotation}}} from center <{self.offset}>"