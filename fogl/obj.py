"""Reading Wavefront obj files into flat model storage."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from itertools import groupby
from operator import itemgetter

from fogl.mesh import Model


class Element(IntEnum):
    """The kinds of statement an obj line can hold."""

    C = 0
    F0 = 1
    F1 = 2
    F2 = 3
    F3 = 4
    G = 5
    L = 6
    M = 7
    O = 8
    S = 9
    U = 10
    V = 11
    VN = 12
    VP = 13

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    def __str__(self) -> str:
        return self.prefix


_PREFIXES = {
    Element.C: "#",
    Element.F0: "f",
    Element.F1: "f",
    Element.F2: "f",
    Element.F3: "f",
    Element.G: "g",
    Element.L: "l",
    Element.M: "mtllib",
    Element.O: "o",
    Element.S: "s",
    Element.U: "usemtl",
    Element.V: "v",
    Element.VN: "vn",
    Element.VP: "vp",
}

_BY_PREFIX = {
    prefix: element for element, prefix in _PREFIXES.items() if prefix != "f"
}

_FLOAT_ELEMENTS = frozenset({Element.V, Element.VN, Element.VP})
_FACE_ELEMENTS = frozenset({Element.F0, Element.F1, Element.F2, Element.F3})
# Faces with both texture and normal indices carry no stored indices.
_INDEX_ELEMENTS = frozenset({Element.F0, Element.F1, Element.F2, Element.L})
_STRING_ELEMENTS = frozenset(
    {Element.C, Element.G, Element.M, Element.O, Element.U}
)


class ObjStatus(Enum):
    """Outcome of parsing obj lines."""

    OK = 0
    ERR_UNKNOWN = 1


def parse_type(line):
    """Return the Element of a line, or None if it is blank or unknown."""
    words = line.split()
    if not words:
        return None
    head = words[0]
    if head == "f":
        first = words[1] if len(words) > 1 else ""
        first_slash = first.find("/")
        last_slash = first.rfind("/")
        if first_slash < 0:
            return Element.F0
        if first_slash == last_slash:
            return Element.F1
        if first_slash == last_slash - 1:
            return Element.F2
        return Element.F3
    return _BY_PREFIX.get(head)


@dataclass
class ObjModel(Model):
    """An obj model: flat values plus the element and value counts of each line."""

    types: list = field(default_factory=list)
    counts: list = field(default_factory=list)
    status: ObjStatus = ObjStatus.OK

    def parse(self, line, element):
        """Store the values of one line of the given element kind."""
        tokens = [token for token in line.split(" ") if token]
        if not tokens:
            return ObjStatus.OK
        rest = tokens[1:]
        n_bools = n_floats = n_ints = n_strings = 0

        if element is Element.S:
            self.bools.append(not rest or rest[0] in ("1", "on"))
            n_bools = 1

        if element in _FLOAT_ELEMENTS:
            values = [float(token) for token in rest]
            self.floats.extend(values)
            n_floats = len(values)

        if element in _INDEX_ELEMENTS:
            if element is Element.L:
                indices = [int(token) for token in rest[1:]]
            else:
                pieces = [piece for piece in re.split("[ /]", line) if piece]
                indices = [int(piece) - 1 for piece in pieces[1:]]
            self.ints.extend(indices)
            n_ints = len(indices)

        if element in _STRING_ELEMENTS:
            self.strings.append("".join(token + " " for token in rest))
            n_strings = 1

        self.counts.append((n_bools, n_floats, n_ints, n_strings))
        self.types.append(element)
        if not (n_bools or n_floats or n_ints or n_strings):
            return ObjStatus.ERR_UNKNOWN
        return ObjStatus.OK

    def index_ranges(self):
        """Map each vertex and face kind to its (begin, end) runs of values.

        Vertex kinds index into floats, face kinds into ints.
        """
        ranges = {element: [] for element in (*_FLOAT_ELEMENTS, *_FACE_ELEMENTS)}
        n_floats = n_ints = 0
        for element, group in groupby(zip(self.types, self.counts), key=itemgetter(0)):
            begin_floats, begin_ints = n_floats, n_ints
            for _, (_, floats, ints, _) in group:
                n_floats += floats
                n_ints += ints
            if element in _FLOAT_ELEMENTS:
                ranges[element].append((begin_floats, n_floats))
            elif element in _FACE_ELEMENTS:
                ranges[element].append((begin_ints, n_ints))
        return ranges


def load(path):
    """Read an obj file; the result's status is the first failure, if any."""
    obj = ObjModel()
    with open(path, encoding="utf-8") as file:
        for line in file:
            line = line.rstrip("\n")
            status = obj.parse(line, parse_type(line))
            if obj.status is ObjStatus.OK:
                obj.status = status
    return obj