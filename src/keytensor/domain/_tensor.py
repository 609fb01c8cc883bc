"""
Tensor interface definitions.

This module defines the domain-level interface for strided tensor containers
using structural typing. The interface captures the addressing surface that
axis operations rely on: the shape (`dim`), the derived stride table, the
flat storage (`vec`) and the bijection between flat locations and
coordinates.

Notes
-----
Axis-taking operations count axes *from the right* (0 is the innermost,
contiguous axis), while `dim` and `strides` are stored outermost-first.
Implementations convert with ``storage_index = rank - 1 - axis``.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Union, runtime_checkable

Number = Union[int, float, complex]


@runtime_checkable
class ITensor(Protocol):
    """
    Strided tensor interface.

    An `ITensor` is a dense multidimensional array stored in a single flat
    sequence in row-major order. This protocol uses structural typing so that
    alternative storage backends can satisfy the same contract.
    """

    # ---------------------------------------------------------------------
    # Shape model
    # ---------------------------------------------------------------------
    @property
    def dim(self) -> tuple[int, ...]:
        """
        Return the axis sizes, outermost first.

        Returns
        -------
        tuple[int, ...]
            One positive size per axis.
        """
        ...

    @property
    def strides(self) -> tuple[int, ...]:
        """
        Return the stride table derived from `dim`, outermost first.

        Returns
        -------
        tuple[int, ...]
            Number of flat positions to advance per step along each axis.
        """
        ...

    @property
    def nelem(self) -> int:
        """
        Return the total number of elements (product of `dim`).
        """
        ...

    @property
    def rank(self) -> int:
        """
        Return the number of axes.
        """
        ...

    @property
    def vec(self) -> Any:
        """
        Return the flat, mutable storage of length `nelem`.
        """
        ...

    # ---------------------------------------------------------------------
    # Addressing
    # ---------------------------------------------------------------------
    def location(self, *coord: Any) -> int:
        """
        Map a coordinate tuple to its flat storage location.

        Raises
        ------
        CoordinateError
            If the coordinate has the wrong rank or an out-of-range component.
        """
        ...

    def coordinate(self, loc: int) -> tuple[int, ...]:
        """
        Map a flat storage location back to its coordinate tuple.

        Raises
        ------
        CoordinateError
            If `loc` is outside ``[0, nelem)``.
        """
        ...

    def plane(self, axis: int, k: int = 0) -> list[int]:
        """
        Enumerate one representative location per line along `axis`, at
        depth `k` on that axis.

        Raises
        ------
        AxisError
            If `axis` is outside ``[0, rank)``.
        """
        ...

    # ---------------------------------------------------------------------
    # Copy / fill utilities
    # ---------------------------------------------------------------------
    def clone(self) -> "ITensor":
        """
        Return a deep copy with its own storage.
        """
        ...

    def fill(self, value: Number) -> None:
        """
        Write `value` into every element.
        """
        ...

    def to_numpy(self) -> Any:
        """
        Return a shaped copy of the storage as a backend-native array.
        """
        ...

    def copy_from_numpy(self, arr: Any) -> None:
        """
        Copy an array-like with exactly `nelem` elements into storage.

        Raises
        ------
        ShapeError
            If the element count differs.
        """
        ...

    # ---------------------------------------------------------------------
    # Axis operations
    # ---------------------------------------------------------------------
    def reduce(
        self,
        axis: int,
        combine: Any,
        *,
        weights: Optional[Sequence[Number]] = None,
        seed: Optional[Number] = None,
    ) -> "ITensor":
        """
        Fold every line along `axis` into a rank-reduced tensor.
        """
        ...

    def transform(self, axis: int, op: Any, weights: Sequence[Number]) -> None:
        """
        Rewrite every element in place as ``op(value, weights[step])``.
        """
        ...

    def repeat_inner(self, n: int) -> "ITensor":
        """
        Return a copy with a new innermost axis of size `n`.
        """
        ...

    def repeat_outer(self, n: int) -> "ITensor":
        """
        Return a copy with a new outermost axis of size `n`.
        """
        ...
