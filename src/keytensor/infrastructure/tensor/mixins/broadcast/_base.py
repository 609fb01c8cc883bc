"""
Broadcast mixin: replicate a tensor along a newly inserted axis.

- `repeat_inner(n)` appends a fastest axis of size `n`: each element is
  repeated `n` times in place (``a a a b b b ...``).
- `repeat_outer(n)` prepends a slowest axis of size `n`: the whole flat
  storage is repeated `n` times end to end (``a b ... a b ...``).

Both return a new tensor and leave the source untouched.
"""

from __future__ import annotations

from abc import ABC
from operator import index

import numpy as np

from .....domain._errors import ShapeError
from .....domain._tensor import ITensor


class TensorMixinBroadcast(ABC):
    """
    Abstract mixin implementing repeat-style broadcasting.
    """

    @staticmethod
    def _repeat_count(n: int, op: str) -> int:
        n = index(n)
        if n <= 0:
            raise ShapeError(f"{op}: repeat count must be positive, got {n}")
        return n

    def repeat_inner(self: ITensor, n: int) -> ITensor:
        """
        Return a copy with a new innermost axis of size `n`.

        Returns
        -------
        ITensor
            Tensor with ``dim + (n,)`` and ``nelem * n`` elements.

        Raises
        ------
        ShapeError
            If `n` is not positive.
        """
        n = self._repeat_count(n, "repeat_inner")
        out = type(self)(self._dim + (n,), dtype=self.dtype)
        out._vec[...] = np.repeat(self._vec, n)
        return out

    def repeat_outer(self: ITensor, n: int) -> ITensor:
        """
        Return a copy with a new outermost axis of size `n`.

        Returns
        -------
        ITensor
            Tensor with ``(n,) + dim`` and ``nelem * n`` elements.

        Raises
        ------
        ShapeError
            If `n` is not positive.
        """
        n = self._repeat_count(n, "repeat_outer")
        out = type(self)((n,) + self._dim, dtype=self.dtype)
        out._vec[...] = np.tile(self._vec, n)
        return out
