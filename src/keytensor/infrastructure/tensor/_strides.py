"""
Shape and stride model.

Pure helpers that derive the stride table of a row-major tensor and convert
between flat storage locations and coordinate tuples. The `Tensor` class
caches the results of `strides_from` and delegates its addressing methods
here.

Example, shape ``(2, 3, 5)``::

    strides = (15, 5, 1)
    location((1, 2, 4)) == 15*1 + 5*2 + 1*4 == 29
    coordinate(29) == (1, 2, 4)
"""

from __future__ import annotations

from operator import index
from typing import Sequence

from ...domain._errors import CoordinateError, ShapeError


def normalize_dim(dim: Sequence[int]) -> tuple[int, ...]:
    """
    Validate a shape sequence and return it as a tuple of Python ints.

    Raises
    ------
    TypeError
        If an entry is not an integer.
    ShapeError
        If an entry is not strictly positive.
    """
    out = tuple(index(d) for d in dim)
    for i, d in enumerate(out):
        if d <= 0:
            raise ShapeError(
                f"axis sizes must be positive; got {d} at position {i} of {out}"
            )
    return out


def numel_from(dim: Sequence[int]) -> int:
    """Return the product of all axis sizes (1 for a rank-0 shape)."""
    n = 1
    for d in dim:
        n *= d
    return n


def strides_from(dim: Sequence[int]) -> tuple[int, ...]:
    """
    Derive the row-major stride table for `dim`.

    ``strides[-1] == 1`` and ``strides[i] == strides[i + 1] * dim[i + 1]``.

    Parameters
    ----------
    dim : Sequence[int]
        Axis sizes, outermost first.

    Returns
    -------
    tuple[int, ...]
        Strides, outermost first.

    Raises
    ------
    ShapeError
        If any axis size is not positive.
    """
    dim = normalize_dim(dim)
    strides = [0] * len(dim)
    p = 1
    for i in range(len(dim) - 1, -1, -1):
        strides[i] = p
        p *= dim[i]
    return tuple(strides)


def location_of(
    coord: Sequence[int], dim: Sequence[int], strides: Sequence[int]
) -> int:
    """
    Return the flat location ``sum(strides[i] * coord[i])``.

    Raises
    ------
    CoordinateError
        If ``len(coord) != len(dim)`` or a component is outside
        ``[0, dim[i])``. Negative components are rejected, not wrapped.
    """
    coord = tuple(index(c) for c in coord)
    if len(coord) != len(dim):
        raise CoordinateError(
            f"coordinate {coord} has rank {len(coord)}, expected {len(dim)}"
        )
    loc = 0
    for i, (c, d, s) in enumerate(zip(coord, dim, strides)):
        if not 0 <= c < d:
            raise CoordinateError(
                f"coordinate component {c} at position {i} is out of range [0, {d})"
            )
        loc += s * c
    return loc


def coordinate_of(loc: int, dim: Sequence[int]) -> tuple[int, ...]:
    """
    Invert `location_of`: peel coordinates off from the innermost axis.

    Raises
    ------
    CoordinateError
        If `loc` is outside ``[0, prod(dim))``.
    """
    loc = index(loc)
    n = numel_from(dim)
    if not 0 <= loc < n:
        raise CoordinateError(f"location {loc} is out of range [0, {n})")
    coord = [0] * len(dim)
    for i in range(len(dim) - 1, -1, -1):
        loc, coord[i] = divmod(loc, dim[i])
    return tuple(coord)
