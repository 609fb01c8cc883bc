"""
KeyTensor: a dense strided tensor container with axis-addressed reductions,
in-place axis transforms, repeat-style broadcasting and elementwise
arithmetic.
"""

from .domain import (
    DEFAULT_DTYPE,
    AxisError,
    CoordinateError,
    ElementKind,
    ITensor,
    ReversedSubtractionWarning,
    ShapeError,
)
from .infrastructure.ops import add, divide, multiply, subtract
from .infrastructure.tensor import (
    Tensor,
    coordinate_of,
    location_of,
    numel_from,
    strides_from,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_DTYPE",
    AxisError.__name__,
    CoordinateError.__name__,
    ElementKind.__name__,
    ITensor.__name__,
    ReversedSubtractionWarning.__name__,
    ShapeError.__name__,
    Tensor.__name__,
    add.__name__,
    coordinate_of.__name__,
    divide.__name__,
    location_of.__name__,
    multiply.__name__,
    numel_from.__name__,
    strides_from.__name__,
    subtract.__name__,
]
