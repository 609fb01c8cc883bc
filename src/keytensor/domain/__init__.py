"""
Backend-agnostic domain layer: tensor protocol, element kinds and errors.
"""

from ._errors import AxisError, CoordinateError, ReversedSubtractionWarning, ShapeError
from ._element_kind import DEFAULT_DTYPE, ElementKind
from ._tensor import ITensor

__all__ = [
    AxisError.__name__,
    CoordinateError.__name__,
    ReversedSubtractionWarning.__name__,
    ShapeError.__name__,
    ElementKind.__name__,
    ITensor.__name__,
    "DEFAULT_DTYPE",
]
