from ._strides import coordinate_of, location_of, numel_from, strides_from
from ._tensor import Tensor

__all__ = [
    Tensor.__name__,
    coordinate_of.__name__,
    location_of.__name__,
    numel_from.__name__,
    strides_from.__name__,
]
