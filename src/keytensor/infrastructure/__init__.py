"""
Concrete NumPy-backed implementations of the domain interfaces.
"""

from .tensor import Tensor

__all__ = [Tensor.__name__]
