"""
Concrete Tensor implementation (NumPy backend).

This module provides the concrete `Tensor`, a dense multidimensional array
stored as a single flat NumPy array in row-major order. It satisfies the
domain-level `ITensor` protocol and assembles the operation families from
the mixin packages:

- addressing and plane enumeration (`TensorShapeAndIndexingMixin`)
- construction, copies and kind-dispatched storage (`TensorMixinMemory`)
- axis reductions (`TensorMixinReduction`)
- in-place axis transforms (`TensorMixinTransform`)
- repeat-style broadcasting (`TensorMixinBroadcast`)
- elementwise arithmetic (`TensorMixinArithmetic`)

Example, a tensor with ``dim == (2, 3, 5)`` after ``fill_sequence()``::

      axis   2 1 0
      dims = 2 3 5

       0  1  2  3  4      15 16 17 18 19
       5  6  7  8  9      20 21 22 23 24
      10 11 12 13 14      25 26 27 28 29

Axis 0 (counted from the right) is contiguous in storage.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from ...domain._element_kind import DEFAULT_DTYPE, ElementKind
from ...domain._errors import ShapeError
from ._shape_and_indexing import TensorShapeAndIndexingMixin
from ._strides import coordinate_of, normalize_dim, numel_from, strides_from
from .mixins import (
    TensorMixinArithmetic,
    TensorMixinBroadcast,
    TensorMixinMemory,
    TensorMixinReduction,
    TensorMixinTransform,
)


class Tensor(
    TensorMixinArithmetic,
    TensorMixinReduction,
    TensorMixinTransform,
    TensorMixinBroadcast,
    TensorMixinMemory,
    TensorShapeAndIndexingMixin,
):
    """
    Dense strided tensor over a numeric element dtype.

    Parameters
    ----------
    dim : Sequence[int]
        Positive axis sizes, outermost first.
    dtype : dtype-like, optional
        Element dtype (integer, floating or complex). Defaults to
        `DEFAULT_DTYPE` (float64).

    Raises
    ------
    ShapeError
        If an axis size is not positive.
    TypeError
        If `dtype` is not a supported numeric type.

    Notes
    -----
    - `vec` is the live flat storage, zero-initialised and owned exclusively
      by this tensor; copies are deep.
    - `dim` is fixed for the lifetime of the tensor. Operations that change
      the shape (`reduce`, `repeat_inner`, ...) return new tensors.
    """

    __hash__ = None

    def __init__(self, dim: Sequence[int], *, dtype: Any = DEFAULT_DTYPE) -> None:
        """
        Construct a new Tensor with zero-filled storage.
        """
        self._dim = normalize_dim(dim)
        self._strides = strides_from(self._dim)
        self._nelem = numel_from(self._dim)
        self._dtype = np.dtype(dtype)
        self._kind = ElementKind.of(self._dtype)
        self._vec = np.zeros(self._nelem, dtype=self._dtype)

    # ----------------------------
    # Shape model
    # ----------------------------
    @property
    def dim(self) -> tuple[int, ...]:
        """Axis sizes, outermost first."""
        return self._dim

    @property
    def shape(self) -> tuple[int, ...]:
        """Alias of `dim`."""
        return self._dim

    @property
    def strides(self) -> tuple[int, ...]:
        """Stride table, outermost first (last entry is 1)."""
        return self._strides

    @property
    def nelem(self) -> int:
        """Total number of elements."""
        return self._nelem

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.
        """
        return self._nelem

    @property
    def rank(self) -> int:
        """Number of axes."""
        return len(self._dim)

    @property
    def ndim(self) -> int:
        """Alias of `rank`."""
        return len(self._dim)

    @property
    def dtype(self) -> np.dtype:
        """Element dtype."""
        return self._dtype

    @property
    def kind(self) -> ElementKind:
        """Element kind; the dispatch key for kind-specific storage paths."""
        return self._kind

    # ----------------------------
    # Storage
    # ----------------------------
    @property
    def vec(self) -> np.ndarray:
        """
        The flat storage (a live, mutable one-dimensional array).
        """
        return self._vec

    @vec.setter
    def vec(self, values: Any) -> None:
        """
        Replace the storage contents with `values` (copied in).

        Raises
        ------
        ShapeError
            If `values` does not hold exactly `nelem` elements.
        """
        arr = np.asarray(values)
        if arr.ndim != 1 or arr.size != self._nelem:
            raise ShapeError(
                f"vec expects a flat sequence of {self._nelem} elements, "
                f"got shape {arr.shape}"
            )
        self._write_back(arr)

    # ----------------------------
    # Comparison / representation
    # ----------------------------
    def __eq__(self, other: object) -> bool:
        """Value equality: same `dim` and same elements."""
        if not isinstance(other, Tensor):
            return NotImplemented
        return self._dim == other._dim and bool(np.array_equal(self._vec, other._vec))

    def __repr__(self) -> str:
        return f"Tensor(dim={self._dim}, dtype={self._dtype})"

    def __str__(self) -> str:
        return self.dump()

    def dump(self, values: bool = True) -> str:
        """
        Render dims, strides and (optionally) values for debugging.

        Values are laid out one innermost row per line, with an extra line
        break at every higher slice boundary.

        Parameters
        ----------
        values : bool, optional
            Include the element values. Defaults to True.
        """
        lines = [
            "Tensor:",
            "   dims = " + " ".join(str(d) for d in self._dim),
            "   offs = " + " ".join(str(s) for s in self._strides),
        ]
        if values:
            body = []
            for loc, v in enumerate(self._vec.tolist()):
                body.append(f"{v} ")
                coord = coordinate_of(loc, self._dim)
                for ax in range(len(self._dim) - 1, 0, -1):
                    if coord[ax] != self._dim[ax] - 1:
                        break
                    body.append("\n")
            lines.append("   vals =")
            lines.extend("      " + row.rstrip() for row in "".join(body).split("\n"))
        return "\n".join(line.rstrip() for line in lines).rstrip() + "\n"
