"""
Transform mixin: rewrite a tensor in place along one axis.

This module defines :class:`TensorMixinTransform`, the axis-transform engine.
Every element ``v`` at step ``i`` along the chosen axis is replaced with
``op(v, weights[i])``. The operator is always called with the current value
first and the weight second, so non-commutative operators (subtraction,
division) behave as written.

Unlike reductions, a transform requires exactly ``dim[axis]`` weights; there
is no implicit weight of 1.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable, Sequence

import numpy as np

from .....domain._tensor import ITensor, Number


class TensorMixinTransform(ABC):
    """
    Abstract mixin implementing in-place axis transforms.

    Notes
    -----
    Results are computed for every affected element and validated by
    `_write_back` before the first one is stored.
    """

    def transform_along_axis(
        self: ITensor,
        start: int,
        axis: int,
        op: Callable[[Any, Any], Any],
        weights: Sequence[Number],
    ) -> None:
        """
        Transform the single line along `axis` beginning at `start`.

        Parameters
        ----------
        start : int
            Flat location whose coordinate along `axis` is 0.
        axis : int
            Axis counted from the right.
        op : Callable[[Any, Any], Any]
            Binary operator called as ``op(current_value, weight)``.
        weights : Sequence[Number]
            Exactly ``dim[axis]`` weights.

        Raises
        ------
        AxisError
            If `axis` is out of range.
        ShapeError
            If ``len(weights) != dim[axis]``.
        CoordinateError
            If `start` is out of range or not at coordinate 0 along `axis`.
        """
        si = self._storage_index(axis)
        w = self._axis_weights(si, weights, required=True, op="transform_along_axis")
        start = self._check_line_start(start, si)

        idx, values = self._transform_line(start, si, op, w)
        self._write_back(values, idx)

    def _transform_line(
        self, start: int, si: int, op: Callable[[Any, Any], Any], weights: list
    ) -> tuple[np.ndarray, list]:
        idx = self._line_indices(start, si)
        current = self._vec[idx].tolist()
        return idx, [op(v, w) for v, w in zip(current, weights)]

    def transform(
        self: ITensor,
        axis: int,
        op: Callable[[Any, Any], Any],
        weights: Sequence[Number],
    ) -> None:
        """
        Transform every line along `axis` in place.

        Equivalent to calling `transform_along_axis` for each location of
        ``plane(axis)``, except that nothing is written unless every result
        can be stored.

        Raises
        ------
        AxisError
            If `axis` is out of range.
        ShapeError
            If ``len(weights) != dim[axis]``.
        """
        si = self._storage_index(axis)
        w = self._axis_weights(si, weights, required=True, op="transform")

        indices, values = [], []
        for loc in self.plane(axis):
            idx, vals = self._transform_line(loc, si, op, w)
            indices.append(idx)
            values.extend(vals)

        self._write_back(values, np.concatenate(indices))
