"""
Reduction mixin: fold a tensor along one axis.

This module defines :class:`TensorMixinReduction`, the axis-reduction engine.
A reduction walks every line along the chosen axis (one line per location of
``plane(axis, 0)``), folds the line into a single value with a binary
operator, and stores the results in a new tensor whose `dim` is the source
`dim` with that axis removed.

Values are read as Python scalars before folding, so integer lines
accumulate without overflow and floating lines accumulate in double
precision; the result tensor's dtype follows the source tensor.
"""

from __future__ import annotations

import operator
from abc import ABC
from numbers import Integral
from typing import Any, Callable, Optional, Sequence

from .....domain._tensor import ITensor, Number


class TensorMixinReduction(ABC):
    """
    Abstract mixin implementing axis reductions.

    Notes
    -----
    - Axes are counted from the right: 0 is the innermost axis.
    - Weights are multiplicative coefficients applied per step along the
      axis. An empty (or None) weight sequence means every step weighs 1.
    - The source tensor is never mutated.
    """

    def fold_along_axis(
        self: ITensor,
        start: int,
        axis: int,
        combine: Callable[[Any, Any], Any],
        *,
        weights: Optional[Sequence[Number]] = None,
        seed: Optional[Number] = None,
    ) -> Any:
        """
        Fold the line along `axis` that begins at flat location `start`.

        Computes ``combine(...combine(combine(seed, w0*v0), w1*v1)..., wn*vn)``
        stepping by ``strides[axis]``.

        Parameters
        ----------
        start : int
            Flat location whose coordinate along `axis` is 0.
        axis : int
            Axis counted from the right.
        combine : Callable[[Any, Any], Any]
            Binary operator ``combine(accumulator, weighted_value)``.
        weights : Optional[Sequence[Number]], optional
            Empty/None, or exactly ``dim[axis]`` coefficients.
        seed : Optional[Number], optional
            Initial accumulator (conventionally the identity of `combine`).
            If None, the accumulator starts from the first weighted element
            of the line.

        Returns
        -------
        Any
            The folded value as a Python scalar.

        Raises
        ------
        AxisError
            If `axis` is out of range.
        ShapeError
            If `weights` is non-empty and its length differs from the axis size.
        CoordinateError
            If `start` is out of range or not at coordinate 0 along `axis`.
        """
        si = self._storage_index(axis)
        w = self._axis_weights(si, weights, required=False, op="fold_along_axis")
        start = self._check_line_start(start, si)
        return self._fold_line(start, si, combine, w, seed)

    def _fold_line(
        self,
        start: int,
        si: int,
        combine: Callable[[Any, Any], Any],
        weights: Optional[list],
        seed: Optional[Number],
    ) -> Any:
        values = self._vec[self._line_indices(start, si)].tolist()
        if weights is not None:
            values = [w * v for w, v in zip(weights, values)]

        if seed is None:
            acc, rest = values[0], values[1:]
        else:
            acc, rest = seed, values

        for v in rest:
            acc = combine(acc, v)
        return acc

    def reduce(
        self: ITensor,
        axis: int,
        combine: Callable[[Any, Any], Any],
        *,
        weights: Optional[Sequence[Number]] = None,
        seed: Optional[Number] = None,
    ) -> ITensor:
        """
        Fold every line along `axis` into a rank-reduced tensor.

        Parameters
        ----------
        axis : int
            Axis counted from the right.
        combine : Callable[[Any, Any], Any]
            Binary operator, see `fold_along_axis`.
        weights : Optional[Sequence[Number]], optional
            Per-step coefficients, see `fold_along_axis`.
        seed : Optional[Number], optional
            Initial accumulator, see `fold_along_axis`.

        Returns
        -------
        ITensor
            New tensor with `dim` minus the reduced axis and the source dtype.
            Its i-th element is the fold of the line starting at
            ``plane(axis)[i]``.

        Raises
        ------
        AxisError
            If `axis` is out of range.
        ShapeError
            If the weight length differs from the axis size.
        """
        si = self._storage_index(axis)
        w = self._axis_weights(si, weights, required=False, op="reduce")

        dim = self._dim[:si] + self._dim[si + 1 :]
        out = type(self)(dim, dtype=self.dtype)

        results = [self._fold_line(loc, si, combine, w, seed) for loc in self.plane(axis)]
        out._write_back(results)
        return out

    def sum_along_axis(
        self: ITensor, axis: int, weights: Optional[Sequence[Number]] = None
    ) -> ITensor:
        """
        Sum along `axis`, optionally weighted.

        Returns
        -------
        ITensor
            Rank-reduced tensor of (weighted) sums.
        """
        return self.reduce(axis, operator.add, weights=weights, seed=0)

    def average_along_axis(
        self: ITensor, axis: int, weights: Optional[Sequence[Number]] = None
    ) -> ITensor:
        """
        Average along `axis`, optionally weighted.

        The (weighted) sum is divided by the axis length ``dim[axis]``, not by
        the sum of the weights: weights scale values, they do not resample.

        Returns
        -------
        ITensor
            Rank-reduced tensor of averages. Sums are exact Python scalars,
            so only the average itself must fit the dtype; for integer
            tensors the quotient is truncated toward zero.
        """
        si = self._storage_index(axis)
        w = self._axis_weights(si, weights, required=False, op="average_along_axis")
        n = self._dim[si]

        dim = self._dim[:si] + self._dim[si + 1 :]
        out = type(self)(dim, dtype=self.dtype)

        results = []
        for loc in self.plane(axis):
            total = self._fold_line(loc, si, operator.add, w, 0)
            if isinstance(total, Integral):
                # exact, truncated toward zero
                q = abs(total) // n
                results.append(q if total >= 0 else -q)
            else:
                results.append(total / n)
        out._write_back(results)
        return out

    def max_along_axis(self: ITensor, axis: int) -> ITensor:
        """
        Maximum along `axis`.

        Each line is seeded from its own first element.

        Returns
        -------
        ITensor
            Rank-reduced tensor of maxima.
        """
        return self.reduce(axis, max)
