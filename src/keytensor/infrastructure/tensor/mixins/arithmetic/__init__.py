"""
Elementwise arithmetic mixin.

Compound assignment (`combine_inplace`, `combine_inplace_scalar`, and the
named ``*_assign`` methods behind ``+=``, ``-=``, ``*=``, ``/=``) is the
primitive; ``+``, ``-``, ``*``, ``/`` are derived as copy-then-assign.

Public API
----------
- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
