"""
Repeat-style broadcasting (`repeat_inner` / `repeat_outer`).
"""

from ._base import TensorMixinBroadcast

__all__ = [
    TensorMixinBroadcast.__name__,
]
