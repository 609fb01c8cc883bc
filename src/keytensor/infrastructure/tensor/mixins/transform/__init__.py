"""
Axis-transform mixin (`transform_along_axis` / `transform`).
"""

from ._base import TensorMixinTransform

__all__ = [
    TensorMixinTransform.__name__,
]
