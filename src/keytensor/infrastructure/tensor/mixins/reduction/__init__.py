"""
Axis-reduction mixin.

Provides the generic fold engine (`fold_along_axis`, `reduce`) and its
instances:

- ``sum_along_axis``     : (weighted) sum
- ``average_along_axis`` : (weighted) sum divided by the axis length
- ``max_along_axis``     : maximum, seeded per line

Public API
----------
- ``TensorMixinReduction``
"""

from ._base import TensorMixinReduction

__all__ = [
    TensorMixinReduction.__name__,
]
