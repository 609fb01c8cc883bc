"""
Tensor addressing and plane enumeration mixin.

This module defines `TensorShapeAndIndexingMixin`, which implements the
coordinate <-> flat-location bijection and the axis-perpendicular plane
enumeration on top of the stride table cached by the concrete `Tensor`.

Design notes
------------
- Public axis arguments count from the right (0 = innermost axis). They are
  converted once by `_storage_index` before `dim`/`strides` are indexed.
- `plane` is the shared iteration primitive for the reduction and transform
  engines: each location it returns starts one line along the named axis.
- Element reads/writes by coordinate (`t[i, j, k]`) validate the coordinate
  and route writes through `_write_back`.
"""

from __future__ import annotations

from operator import index
from typing import Any, Optional, Sequence

import numpy as np

from ...domain._errors import AxisError, CoordinateError, ShapeError
from ...domain._tensor import ITensor
from ._strides import coordinate_of, location_of


class TensorShapeAndIndexingMixin(ITensor):
    """
    Addressing operations for the concrete Tensor implementation.

    Notes
    -----
    Methods assume the host class provides `_dim`, `_strides`, `_nelem` and
    `_vec`, plus `_write_back` from the memory mixin.
    """

    # ----------------------------
    # Coordinate <-> location
    # ----------------------------
    def location(self, *coord: Any) -> int:
        """
        Return the flat storage location of a coordinate.

        Accepts either one sequence, ``t.location((1, 2, 4))``, or separate
        integers, ``t.location(1, 2, 4)``.

        Raises
        ------
        CoordinateError
            If the coordinate rank differs from the tensor rank or a component
            lies outside ``[0, dim[i])``.
        """
        if len(coord) == 1 and isinstance(coord[0], (tuple, list, np.ndarray)):
            coord = tuple(coord[0])
        return location_of(coord, self._dim, self._strides)

    def coordinate(self, loc: int) -> tuple[int, ...]:
        """
        Return the coordinate tuple stored at flat location `loc`.

        Raises
        ------
        CoordinateError
            If `loc` is outside ``[0, nelem)``.
        """
        return coordinate_of(loc, self._dim)

    def __getitem__(self, key: Any) -> Any:
        """Read the element at a coordinate (``t[i, j, k]``)."""
        key = key if isinstance(key, tuple) else (key,)
        return self._vec[location_of(key, self._dim, self._strides)]

    def __setitem__(self, key: Any, value: Any) -> None:
        """Write the element at a coordinate (``t[i, j, k] = v``)."""
        key = key if isinstance(key, tuple) else (key,)
        loc = location_of(key, self._dim, self._strides)
        self._write_back(value, loc)

    # ----------------------------
    # Axis helpers
    # ----------------------------
    def _storage_index(self, axis: int) -> int:
        """
        Convert an axis counted from the right into a storage index.

        Raises
        ------
        TypeError
            If `axis` is not an integer.
        AxisError
            If `axis` is outside ``[0, rank)``.
        """
        axis = index(axis)
        rank = len(self._dim)
        if not 0 <= axis < rank:
            raise AxisError(axis, rank)
        return rank - 1 - axis

    def _axis_weights(
        self, si: int, weights: Optional[Sequence[Any]], *, required: bool, op: str
    ) -> Optional[list]:
        """
        Validate a per-step weight sequence for the axis at storage index `si`.

        Returns
        -------
        Optional[list]
            The weights as Python scalars, or None when `weights` is empty and
            not `required` (every step then weighs 1).

        Raises
        ------
        ShapeError
            If the length differs from ``dim[si]`` (or is empty while
            `required`).
        """
        n = self._dim[si]
        w = np.asarray([] if weights is None else weights)
        if w.ndim != 1:
            raise ShapeError(f"{op}: weights must be one-dimensional, got shape {w.shape}")
        if w.size == 0 and not required:
            return None
        if w.size != n:
            raise ShapeError(f"{op}: expected {n} weights for axis of size {n}, got {w.size}")
        return w.tolist()

    def _check_line_start(self, start: int, si: int) -> int:
        """
        Validate that `start` is the first element of a line along `si`.

        Raises
        ------
        CoordinateError
            If `start` is out of range or its coordinate along the axis is
            not 0.
        """
        start = index(start)
        coord = coordinate_of(start, self._dim)
        if coord[si] != 0:
            raise CoordinateError(
                f"location {start} (coordinate {coord}) does not start a line: "
                f"coordinate {si} must be 0"
            )
        return start

    def _line_indices(self, start: int, si: int) -> np.ndarray:
        """Flat locations of the line along `si` beginning at `start`."""
        stride = self._strides[si]
        return np.arange(start, start + self._dim[si] * stride, stride)

    # ----------------------------
    # Plane enumeration
    # ----------------------------
    def plane(self, axis: int, k: int = 0) -> list[int]:
        """
        Enumerate the plane perpendicular to `axis` at depth `k`.

        Every flat location whose coordinate along `axis` is 0 is taken in
        storage order and shifted by ``k * strides[axis]``, which yields one
        location per line along the axis (``nelem // dim[axis]`` entries).

        Parameters
        ----------
        axis : int
            Axis counted from the right.
        k : int, optional
            Depth along the axis. Defaults to 0.

        Returns
        -------
        list[int]
            Flat locations in increasing order.

        Raises
        ------
        AxisError
            If `axis` is outside ``[0, rank)``.
        CoordinateError
            If `k` is outside ``[0, dim[axis])``.
        """
        si = self._storage_index(axis)
        k = index(k)
        if not 0 <= k < self._dim[si]:
            raise CoordinateError(
                f"plane depth {k} is out of range [0, {self._dim[si]}) for axis {axis}"
            )
        stride = self._strides[si]
        locs = np.arange(self._nelem)
        on_plane = (locs // stride) % self._dim[si] == 0
        return (locs[on_plane] + k * stride).tolist()
