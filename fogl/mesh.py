"""Model storage and triangle meshes sampled from a parametric surface."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import chain


@dataclass
class Model:
    """Flat storage shared by all models: flags, indices, coordinates and text."""

    bools: list[bool] = field(default_factory=list)
    ints: list[int] = field(default_factory=list)
    floats: list[float] = field(default_factory=list)
    strings: list[str] = field(default_factory=list)


def sphere_vertex(s, t):
    """Map (s, t) in [0, 1]^2 onto the unit sphere as an (x, y, z) triple."""
    theta = s * math.pi * 2
    phi = t * math.pi
    return (
        math.cos(theta) * math.sin(phi),
        math.sin(theta) * math.sin(phi),
        math.cos(phi),
    )


class Mesh(Model):
    """A width x height grid of vertices joined into triangles."""

    def __init__(self, width, height, fn):
        super().__init__()
        if width < 2 or height < 2:
            raise ValueError(
                f"mesh needs at least 2x2 samples, got {width}x{height}"
            )
        for i in range(width):
            for j in range(height):
                index = j * width + i
                self.floats.extend(fn(i / (width - 1), j / (height - 1)))
                if i < width - 1 and j < height - 1:
                    self.ints.extend((
                        index, index + 1, index + width + 1,
                        index, index + width + 1, index + width,
                    ))

    def to_obj(self) -> str:
        """Render the vertices and faces as Wavefront obj text."""
        entries = chain(
            (("v", f"{value:g}") for value in self.floats),
            (("f", str(index + 1)) for index in self.ints),
        )
        parts = []
        column = 0
        for prefix, text in entries:
            if column == 0:
                parts.append(prefix + " ")
            parts.append(text + " ")
            column += 1
            if column == 3:
                column = 0
                parts.append("\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_obj()