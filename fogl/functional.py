"""Applying functions across the cartesian product or the zip of arrays."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product
from math import prod


def _is_array(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _axes(args):
    """Each argument as an indexable axis; scalars become one-element axes."""
    return [arg if _is_array(arg) else (arg,) for arg in args]


def _combinations(args):
    """Every combination of elements, the first argument varying fastest."""
    for combo in product(*reversed(_axes(args))):
        yield combo[::-1]


def size_product(*args):
    """Product of the lengths of the array arguments; scalars count as 1."""
    return prod(len(axis) for axis in _axes(args))


def for_seq(seq, fn, *args):
    """Apply fn to combination number seq of the arguments' elements.

    Combinations are numbered with the first argument varying fastest.
    """
    total = size_product(*args)
    if not 0 <= seq < total:
        raise IndexError(f"combination {seq} outside range of {total}")
    chosen = []
    for axis in _axes(args):
        seq, index = divmod(seq, len(axis))
        chosen.append(axis[index])
    return fn(*chosen)


def for_all(fn, *args):
    """Apply fn to every combination of the arguments' elements, in order.

    fn may also be an iterable of functions, each applied over all
    combinations in turn.
    """
    functions = [fn] if callable(fn) else list(fn)
    for function in functions:
        for combo in _combinations(args):
            function(*combo)


def map_for_all(fn, *args):
    """The results of fn over every combination, in combination order."""
    return [fn(*combo) for combo in _combinations(args)]


def for_zip(fn, *args):
    """Apply fn to the elements at each index of equally long arrays."""
    lengths = {len(arg) for arg in args}
    if len(lengths) > 1:
        raise ValueError(f"arrays differ in length: {sorted(lengths)}")
    for items in zip(*args):
        fn(*items)