"""
Element-kind-specific storage primitives for KeyTensor tensors.

This module registers the implementations of `TensorMixinMemory._staged` and
`TensorMixinMemory._write_back` via `tensor_control_path_manager`:

- `ElementKind.INTEGRAL`: staging yields exact Python integers (an object
  array), so elementwise arithmetic never wraps or rounds; write-back
  rejects non-finite and out-of-range results and truncates fractional
  results toward zero.
- `ElementKind.INEXACT`: staging is a plain copy; write-back assigns as
  computed, rejecting complex values for real storage.

The result dtype always follows the tensor being written to (the left
operand of an arithmetic expression), never the right-hand operand.
"""

import math
from numbers import Integral, Number, Real
from typing import Any

import numpy as np

from ..._tensor_builder import tensor_control_path_manager

from .....domain._element_kind import ElementKind
from .....domain._tensor import ITensor

from ._base import TensorMixinMemory as TMM


def _as_array(values: Any) -> np.ndarray:
    # Python sequences keep their scalars as-is; letting NumPy infer a dtype
    # would round large integers mixed with floats.
    if isinstance(values, (list, tuple)):
        return np.array(values, dtype=object)
    return np.asarray(values)


def _numeric_items(arr: np.ndarray, dtype: np.dtype) -> list:
    items = arr.ravel().tolist()
    for v in items:
        if not isinstance(v, Number):
            raise TypeError(
                f"cannot store {type(v).__name__} values in a {dtype} tensor"
            )
    return items


def _exact_integers(arr: np.ndarray, dtype: np.dtype) -> list[int]:
    """Convert numeric scalars to Python ints, truncating toward zero."""
    out = []
    for v in _numeric_items(arr, dtype):
        if not isinstance(v, Real):
            raise TypeError(f"cannot store complex values in a {dtype} tensor")
        if isinstance(v, Integral):
            out.append(int(v))
            continue
        v = float(v)
        if not math.isfinite(v):
            raise OverflowError(f"cannot store non-finite values in a {dtype} tensor")
        out.append(math.trunc(v))
    return out


@tensor_control_path_manager(TMM, TMM._staged, ElementKind.INTEGRAL)
def tensor_staged_integral(self: ITensor) -> np.ndarray:
    """
    Stage integer storage as an object array of Python ints.

    Arithmetic on the staged array is exact at any magnitude, so a result
    that does not fit the storage dtype reaches `_write_back` unchanged and
    is rejected there.
    """
    return self._vec.astype(object)


@tensor_control_path_manager(TMM, TMM._staged, ElementKind.INEXACT)
def tensor_staged_inexact(self: ITensor) -> np.ndarray:
    """
    Copy floating/complex storage without changing its dtype.
    """
    return self._vec.copy()


@tensor_control_path_manager(TMM, TMM._write_back, ElementKind.INTEGRAL)
def tensor_write_back_integral(
    self: ITensor, values: Any, where: Any = slice(None)
) -> None:
    """
    Store values into integer storage.

    Raises
    ------
    OverflowError
        If a value is NaN/inf or lies outside the dtype's range.
    TypeError
        If the values are complex or not numeric.

    Notes
    -----
    Fractional values are truncated toward zero, the conversion C-family
    integer storage applies. All values are checked before any is stored.
    """
    arr = _as_array(values)

    if arr.dtype.kind == "c":
        raise TypeError(f"cannot store complex values in a {self.dtype} tensor")
    if arr.dtype.kind in ("f", "O"):
        shape = arr.shape
        ints = _exact_integers(arr, self.dtype)
        lo, hi = (min(ints), max(ints)) if ints else (0, 0)
        arr = np.array(ints, dtype=object).reshape(shape)
    elif arr.dtype.kind in ("b", "i", "u"):
        lo, hi = (int(arr.min()), int(arr.max())) if arr.size else (0, 0)
    else:
        raise TypeError(f"cannot store {arr.dtype} values in a {self.dtype} tensor")

    info = np.iinfo(self.dtype)
    if lo < info.min or hi > info.max:
        raise OverflowError(
            f"values in [{lo}, {hi}] do not fit in a {self.dtype} tensor "
            f"(range [{info.min}, {info.max}])"
        )

    self._vec[where] = arr.astype(self.dtype)


@tensor_control_path_manager(TMM, TMM._write_back, ElementKind.INEXACT)
def tensor_write_back_inexact(
    self: ITensor, values: Any, where: Any = slice(None)
) -> None:
    """
    Store values into floating/complex storage.

    Raises
    ------
    TypeError
        If complex values would be written into real storage, or the values
        are not numeric.
    """
    arr = _as_array(values)

    if arr.dtype.kind == "O":
        items = _numeric_items(arr, self.dtype)
        if self.dtype.kind != "c" and not all(isinstance(v, Real) for v in items):
            raise TypeError(f"cannot store complex values in a {self.dtype} tensor")
        arr = np.array(items, dtype=self.dtype).reshape(arr.shape)

    if arr.dtype.kind == "c" and self.dtype.kind != "c":
        raise TypeError(f"cannot store complex values in a {self.dtype} tensor")
    if arr.dtype.kind not in ("b", "i", "u", "f", "c"):
        raise TypeError(f"cannot store {arr.dtype} values in a {self.dtype} tensor")

    self._vec[where] = arr
