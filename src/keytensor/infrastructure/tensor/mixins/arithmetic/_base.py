"""
Arithmetic mixin defining elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, which implements
elementwise arithmetic between tensors of identical `dim` and between a
tensor and a scalar.

Compound assignment is the primitive: `combine_inplace` and
`combine_inplace_scalar` apply a binary operator over the flat storage and
write the results back into the left operand, returning it. Every binary
operator is derived from a compound assignment on a copy:

    a + b  ==  a.clone().add_assign(b)

The result dtype always follows the left operand.
"""

from __future__ import annotations

import warnings
from abc import ABC
from numbers import Integral, Number
from typing import Any, Callable, Union

import numpy as np

from .....domain._element_kind import ElementKind
from .....domain._errors import ReversedSubtractionWarning, ShapeError
from .....domain._tensor import ITensor

Operand = Union["ITensor", Number]


def _truncating_divide(a: np.ndarray, b: Any) -> np.ndarray:
    """Exact integer quotient of staged Python ints, rounded toward zero."""
    q = np.floor_divide(a, b)
    # Floor and truncation differ where the division is inexact and the
    # operands have opposite signs.
    fix = (np.remainder(a, b) != 0) & ((a < 0) != (np.asarray(b) < 0))
    return q + fix.astype(object)


class TensorMixinArithmetic(ABC):
    """
    Abstract mixin implementing elementwise arithmetic for tensors.

    Notes
    -----
    - No broadcasting: tensor operands must have exactly the same `dim`.
    - Operators receive whole staged arrays, so `op` must be array-aware
      (a NumPy ufunc such as ``np.add``, or any callable built from array
      operators).
    - ``scalar - tensor`` is evaluated as ``tensor - scalar``; see `__rsub__`.
    - ``scalar / tensor`` is not defined.
    """

    # Make NumPy scalars defer to the reflected operators below.
    __array_ufunc__ = None

    # ----------------------------
    # Validation helpers
    # ----------------------------
    @staticmethod
    def _binary_op_shape_check(a: ITensor, b: ITensor) -> None:
        """
        Validate shape compatibility for binary elementwise operations.

        Raises
        ------
        ShapeError
            If `dim` sequences do not match exactly.
        """
        if tuple(a.dim) != tuple(b.dim):
            raise ShapeError(f"Shape mismatch: {tuple(a.dim)} vs {tuple(b.dim)}")

    @staticmethod
    def _check_scalar(s: Any) -> None:
        if not isinstance(s, Number):
            raise TypeError(f"Unsupported operand type: {type(s)!r}")

    # ----------------------------
    # Compound-assignment primitives
    # ----------------------------
    def combine_inplace(
        self: ITensor, other: ITensor, op: Callable[[Any, Any], Any]
    ) -> ITensor:
        """
        Apply ``op(self, other)`` pairwise over flat storage, in place.

        Parameters
        ----------
        other : ITensor
            Tensor with the same `dim`.
        op : Callable[[Any, Any], Any]
            Array-aware binary operator.

        Returns
        -------
        ITensor
            `self`, mutated.

        Raises
        ------
        ShapeError
            If ``self.dim != other.dim``.
        """
        if not isinstance(other, ITensor):
            raise TypeError(f"Unsupported operand type: {type(other)!r}")
        self._binary_op_shape_check(self, other)
        self._write_back(op(self._staged(), other._staged()))
        return self

    def combine_inplace_scalar(
        self: ITensor, scalar: Number, op: Callable[[Any, Any], Any]
    ) -> ITensor:
        """
        Apply ``op(element, scalar)`` to every element, in place.

        Returns
        -------
        ITensor
            `self`, mutated.

        Raises
        ------
        TypeError
            If `scalar` is not a number.
        """
        self._check_scalar(scalar)
        self._write_back(op(self._staged(), scalar))
        return self

    def _combine(self, other: Operand, op: Callable[[Any, Any], Any]) -> ITensor:
        if isinstance(other, ITensor):
            return self.combine_inplace(other, op)
        return self.combine_inplace_scalar(other, op)

    # ----------------------------
    # Named compound assignments
    # ----------------------------
    def add_assign(self, other: Operand) -> ITensor:
        """In-place ``self += other``; returns `self`."""
        return self._combine(other, np.add)

    def subtract_assign(self, other: Operand) -> ITensor:
        """In-place ``self -= other``; returns `self`."""
        return self._combine(other, np.subtract)

    def multiply_assign(self, other: Operand) -> ITensor:
        """In-place ``self *= other``; returns `self`."""
        return self._combine(other, np.multiply)

    def divide_assign(self, other: Operand) -> ITensor:
        """
        In-place ``self /= other``; returns `self`.

        Integer tensors divided by integers use exact division truncated
        toward zero.

        Raises
        ------
        ShapeError
            If `other` is a tensor with a different `dim`.
        ZeroDivisionError
            If `self` holds integers and a divisor is zero.
        """
        if self.kind is not ElementKind.INTEGRAL:
            return self._combine(other, np.true_divide)

        if isinstance(other, ITensor):
            self._binary_op_shape_check(self, other)
            divisor = other.vec
            exact = other.kind is ElementKind.INTEGRAL
        else:
            self._check_scalar(other)
            divisor = other
            exact = isinstance(other, Integral)
        if np.any(np.asarray(divisor) == 0):
            raise ZeroDivisionError(f"integer tensor division by zero ({self.dtype})")
        return self._combine(other, _truncating_divide if exact else np.true_divide)

    def __iadd__(self, other: Operand) -> ITensor:
        return self.add_assign(other)

    def __isub__(self, other: Operand) -> ITensor:
        return self.subtract_assign(other)

    def __imul__(self, other: Operand) -> ITensor:
        return self.multiply_assign(other)

    def __itruediv__(self, other: Operand) -> ITensor:
        return self.divide_assign(other)

    # ----------------------------
    # Derived binary operators (copy, then compound-assign)
    # ----------------------------
    def __add__(self, other: Operand) -> ITensor:
        """Elementwise ``self + other`` as a new tensor."""
        if not isinstance(other, (ITensor, Number)):
            return NotImplemented
        return self.clone().add_assign(other)

    def __sub__(self, other: Operand) -> ITensor:
        """Elementwise ``self - other`` as a new tensor."""
        if not isinstance(other, (ITensor, Number)):
            return NotImplemented
        return self.clone().subtract_assign(other)

    def __mul__(self, other: Operand) -> ITensor:
        """Elementwise ``self * other`` as a new tensor."""
        if not isinstance(other, (ITensor, Number)):
            return NotImplemented
        return self.clone().multiply_assign(other)

    def __truediv__(self, other: Operand) -> ITensor:
        """Elementwise ``self / other`` as a new tensor."""
        if not isinstance(other, (ITensor, Number)):
            return NotImplemented
        return self.clone().divide_assign(other)

    def __radd__(self, other: Number) -> ITensor:
        """``scalar + tensor``; addition commutes."""
        if not isinstance(other, Number):
            return NotImplemented
        return self.__add__(other)

    def __rmul__(self, other: Number) -> ITensor:
        """``scalar * tensor``; multiplication commutes."""
        if not isinstance(other, Number):
            return NotImplemented
        return self.__mul__(other)

    def __rsub__(self, other: Number) -> ITensor:
        """
        ``scalar - tensor``, evaluated as ``tensor - scalar``.

        This is not the algebraic ``-(tensor - scalar)``. The convention is
        kept for existing call sites; a `ReversedSubtractionWarning` is
        emitted on every use.
        """
        if not isinstance(other, Number):
            return NotImplemented
        warnings.warn(
            "scalar - Tensor is evaluated as Tensor - scalar",
            ReversedSubtractionWarning,
            stacklevel=2,
        )
        return self.__sub__(other)
