"""
Tensor memory / construction mixin.

This module defines `TensorMixinMemory`, a focused mixin that provides
factory constructors (zeros/full), copy and fill utilities, and the two
storage primitives every mutating operation goes through:

- `_staged()` returns a working copy of the flat storage, exact for integer
  storage so that elementwise arithmetic does not overflow before it is
  checked;
- `_write_back(values, where)` stores computed values into the flat storage
  while honoring the tensor's own dtype.

Both primitives depend on the element kind and are registered as control
paths in `_tensor_storage`. Nothing writes to storage without going through
`_write_back`, so every operation either completes or raises before the
first element changes.
"""

from __future__ import annotations

from abc import ABC
from numbers import Number
from typing import Any, Sequence, Type

import numpy as np

from .....domain._element_kind import DEFAULT_DTYPE
from .....domain._errors import ShapeError
from .....domain._tensor import ITensor


class TensorMixinMemory(ABC):
    """
    Mixin that implements tensor construction and memory-management helpers.

    Notes
    -----
    The host class provides `_vec`, `_dim`, `_nelem`, `dtype` and `kind`.
    """

    # ----------------------------
    # Factories
    # ----------------------------
    @classmethod
    def zeros(cls: Type[ITensor], dim: Sequence[int], *, dtype=DEFAULT_DTYPE) -> ITensor:
        """
        Create a zero-filled tensor.

        Parameters
        ----------
        dim : Sequence[int]
            Axis sizes, outermost first.
        dtype : dtype-like, optional
            Element dtype. Defaults to `DEFAULT_DTYPE`.
        """
        return cls(dim, dtype=dtype)

    @classmethod
    def full(
        cls: Type[ITensor], dim: Sequence[int], value: Number, *, dtype=DEFAULT_DTYPE
    ) -> ITensor:
        """
        Create a tensor with every element set to `value`.
        """
        out = cls(dim, dtype=dtype)
        out.fill(value)
        return out

    # ----------------------------
    # Storage primitives (dispatched on kind)
    # ----------------------------
    def _staged(self) -> np.ndarray:
        """
        Return a working copy of the flat storage for elementwise computation.

        Returns
        -------
        np.ndarray
            A new one-dimensional array. Integer storage is staged as
            Python ints (object dtype) so that intermediate results are
            exact and can be range-checked by `_write_back` instead of
            wrapping in the storage dtype.
        """
        ...

    def _write_back(self, values: Any, where: Any = slice(None)) -> None:
        """
        Store `values` into ``vec[where]`` honoring the tensor's dtype.

        Parameters
        ----------
        values : array-like or scalar
            Computed values. Must broadcast to ``vec[where]``.
        where : slice or index array, optional
            Target positions in the flat storage. Defaults to all of it.

        Raises
        ------
        OverflowError
            If integer storage cannot hold a result (out of range or
            non-finite).
        TypeError
            If complex results would be written into real storage.
        """
        ...

    # ----------------------------
    # Copies
    # ----------------------------
    def clone(self: ITensor) -> ITensor:
        """
        Return a deep copy of this tensor with its own storage.
        """
        out = type(self)(self.dim, dtype=self.dtype)
        out._vec[...] = self._vec
        return out

    def __copy__(self) -> ITensor:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> ITensor:
        out = self.clone()
        memo[id(self)] = out
        return out

    def to_numpy(self) -> np.ndarray:
        """
        Return a copy of the storage shaped as `dim`.
        """
        return self._vec.reshape(self._dim).copy()

    def copy_from_numpy(self, arr: Any) -> None:
        """
        Copy an array-like into this tensor's storage (in-place).

        The source may be flat or shaped; only its element count must match,
        and its elements are taken in row-major order.

        Raises
        ------
        ShapeError
            If the source does not hold exactly `nelem` elements.
        """
        src = np.asarray(arr)
        if src.size != self._nelem:
            raise ShapeError(
                f"copy_from_numpy expects {self._nelem} elements for dim {self._dim}, "
                f"got {src.size} (shape {src.shape})"
            )
        self._write_back(src.reshape(-1))

    def copy_from(self, other: ITensor) -> None:
        """
        Copy another tensor's values into this tensor (in-place).

        Raises
        ------
        ShapeError
            If the two tensors have different `dim`.
        """
        if tuple(other.dim) != self._dim:
            raise ShapeError(f"copy_from shape mismatch: {self._dim} vs {other.dim}")
        self._write_back(other.vec)

    # ----------------------------
    # Fill
    # ----------------------------
    def fill(self, value: Number) -> None:
        """
        Write `value` into every element.

        Raises
        ------
        TypeError
            If `value` is not a number.
        """
        if not isinstance(value, Number):
            raise TypeError(f"fill value must be a number, got {type(value)!r}")
        self._write_back(value)

    def fill_sequence(self, start: int = 0) -> None:
        """
        Debug helper: write ``start, start + 1, ...`` in flat storage order.
        """
        self._write_back(np.arange(start, start + self._nelem))

