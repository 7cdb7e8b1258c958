"""Reading Wavefront material (mtl) files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class MaterialType(Enum):
    """The statements a material file can hold, valued by their keyword."""

    BUMP = "bump"
    D = "d"
    DISP = "disp"
    DECAL = "decal"
    ILLUM = "illum"
    KA = "Ka"
    KD = "Kd"
    KS = "Ks"
    MAP_BUMP = "map_bump"
    MAP_D = "map_d"
    MAP_KA = "map_Ka"
    MAP_KD = "map_Kd"
    MAP_KS = "map_Ks"
    MAP_NS = "map_Ns"
    NEWMTL = "newmtl"
    NS = "Ns"
    REFL = "refl"
    TR = "tr"

    def __str__(self) -> str:
        return self.value


_FLOAT_TYPES = frozenset(
    {MaterialType.D, MaterialType.KA, MaterialType.KD, MaterialType.KS}
)


def parse_type(word):
    """Return the MaterialType for a keyword, or None if it is unknown."""
    if word == MaterialType.DECAL.value:
        return MaterialType.ILLUM
    try:
        return MaterialType(word)
    except ValueError:
        return None


@dataclass
class Material:
    """Values read from a material file, in the order of their statements."""

    bools: list[bool] = field(default_factory=list)
    floats: list[float] = field(default_factory=list)
    ints: list[int] = field(default_factory=list)
    strings: list[str] = field(default_factory=list)
    types: list[MaterialType] = field(default_factory=list)

    def parse(self, line, delim=" "):
        """Store one line split on any of the delimiter characters.

        Returns False when the line holds no known statement.
        """
        if not delim:
            raise ValueError("delimiter must not be empty")
        tokens = [token for token in re.split(f"[{re.escape(delim)}]", line) if token]
        if not tokens:
            return False
        kind = parse_type(tokens[0])
        if kind is None:
            return False
        rest = tokens[1:]
        if kind in _FLOAT_TYPES:
            values = [float(token) for token in rest]
            self.floats.extend(values)
        else:
            self.strings.append(" ".join(rest))
        self.types.append(kind)
        return True


def load_material(path):
    """Read a material file into a new Material."""
    material = Material()
    with open(path, encoding="utf-8") as file:
        for line in file:
            material.parse(line.rstrip("\n"))
    return material