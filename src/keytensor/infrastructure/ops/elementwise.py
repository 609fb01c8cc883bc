"""
Free-function elementwise arithmetic.

Each function accepts a tensor and a tensor-or-scalar in either order and
returns a new tensor, leaving both operands untouched. The conventions are
those of the Tensor operators:

- ``add(s, t) == add(t, s)`` and ``multiply(s, t) == multiply(t, s)``
- ``subtract(s, t)`` evaluates ``t - s`` (with a `ReversedSubtractionWarning`)
- ``divide(s, t)`` is not defined and raises `TypeError`
"""

from __future__ import annotations

from numbers import Number
from typing import Union

from ...domain._tensor import ITensor

Operand = Union[ITensor, Number]


def _require_tensor(op: str, lhs: Operand, rhs: Operand) -> None:
    if not isinstance(lhs, ITensor) and not isinstance(rhs, ITensor):
        raise TypeError(
            f"{op}() needs at least one Tensor operand, got "
            f"{type(lhs).__name__} and {type(rhs).__name__}"
        )


def add(lhs: Operand, rhs: Operand) -> ITensor:
    """Return ``lhs + rhs`` as a new tensor."""
    _require_tensor("add", lhs, rhs)
    if isinstance(lhs, ITensor):
        return lhs + rhs
    return rhs.__radd__(lhs)


def subtract(lhs: Operand, rhs: Operand) -> ITensor:
    """Return ``lhs - rhs`` as a new tensor (``t - s`` when `lhs` is a scalar)."""
    _require_tensor("subtract", lhs, rhs)
    if isinstance(lhs, ITensor):
        return lhs - rhs
    return rhs.__rsub__(lhs)


def multiply(lhs: Operand, rhs: Operand) -> ITensor:
    """Return ``lhs * rhs`` as a new tensor."""
    _require_tensor("multiply", lhs, rhs)
    if isinstance(lhs, ITensor):
        return lhs * rhs
    return rhs.__rmul__(lhs)


def divide(lhs: ITensor, rhs: Operand) -> ITensor:
    """
    Return ``lhs / rhs`` as a new tensor.

    Raises
    ------
    TypeError
        If `lhs` is not a tensor.
    """
    if not isinstance(lhs, ITensor):
        raise TypeError(f"divide() needs a Tensor dividend, got {type(lhs).__name__}")
    return lhs / rhs
