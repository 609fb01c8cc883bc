"""
Memory mixins and element-kind-specific storage implementations.

This package aggregates the construction, copy and fill helpers of the
Tensor class together with the kind-dispatched storage primitives
(`_staged` / `_write_back`).

Design notes
------------
- `_tensor_storage` is imported for its *side effects*: registering control
  paths with the tensor control-path manager.
- Only the base mixin class is part of the public interface.
"""

from ._tensor_storage import *
from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
