"""Ordered packs with set-like operators, pack graphs and per-class instance ids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Pack:
    """An ordered, immutable collection of items that may hold duplicates.

    Equality is order-sensitive; use permutes() to compare contents only.
    """

    items: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __add__(self, other) -> Pack:
        """Append the items of other that are not yet present."""
        if not isinstance(other, Pack):
            return NotImplemented
        merged = list(self.items)
        for item in other.items:
            if item not in merged:
                merged.append(item)
        return Pack(merged)

    def __sub__(self, other) -> Pack:
        """Remove every occurrence of each item of other.

        Each removal pass rebuilds the pack back to front, so the order is
        reversed once for every item of other.
        """
        if not isinstance(other, Pack):
            return NotImplemented
        remaining = list(self.items)
        for removed in other.items:
            remaining = [item for item in reversed(remaining) if item != removed]
        return Pack(remaining)

    def __xor__(self, other) -> Pack:
        """Items found in exactly one of the two packs."""
        if not isinstance(other, Pack):
            return NotImplemented
        return (self - other) + (other - self)

    def __and__(self, other) -> Pack:
        """Items found in both packs."""
        if not isinstance(other, Pack):
            return NotImplemented
        return (self + other) - (self ^ other)

    def prune(self) -> Pack:
        """Drop duplicates, keeping the first occurrence of each item."""
        return Pack() + self

    def index_of(self, item) -> int:
        """Index of the first matching item, or -1."""
        return next(
            (index for index, candidate in enumerate(self.items) if candidate == item),
            -1,
        )

    def indices_of(self, other) -> tuple[int, ...]:
        """index_of for each item of other, in order."""
        return tuple(self.index_of(item) for item in other)

    def rotate(self) -> Pack:
        """Move the first item to the end."""
        if not self.items:
            raise ValueError("cannot rotate an empty pack")
        return Pack(self.items[1:] + self.items[:1])

    def contains(self, item) -> bool:
        return item in self.items

    def get(self, index) -> Any:
        """The item at index, or None when the index is outside the pack."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def permutes(self, other) -> bool:
        """True if both packs hold the same items, ignoring order."""
        return len(self ^ other) == 0


def _as_pack(value) -> Pack:
    return value if isinstance(value, Pack) else Pack(value)


@dataclass(frozen=True)
class Graph:
    """A graph of vertex values and (source, destination) index edges."""

    vertices: Pack = field(default_factory=Pack)
    edges: Pack = field(default_factory=Pack)

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", _as_pack(self.vertices))
        object.__setattr__(self, "edges", _as_pack(self.edges))

    def add_node(self, node) -> Graph:
        """A graph with node appended to the vertices unless already present."""
        return Graph(self.vertices + Pack((node,)), self.edges)

    def add_nodes(self, nodes) -> Graph:
        """A graph with each new node appended to the vertices."""
        return Graph(self.vertices + _as_pack(nodes), self.edges)

    def add_edge(self, source, dest) -> Graph:
        """A graph with the edge (source, dest) added, without duplicates."""
        return Graph(self.vertices, (self.edges + Pack(((source, dest),))).prune())


class Counted:
    """Gives each instance a sequential id, counted separately per class."""

    _next_id = 0

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._next_id = 0

    def __init__(self):
        cls = type(self)
        self.instance_id = cls._next_id
        cls._next_id += 1

    @classmethod
    def peek(cls) -> int:
        """The id the next instance will receive."""
        return cls._next_id