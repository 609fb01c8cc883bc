"""
Element kind abstraction.

This module classifies NumPy dtypes into the small set of element categories
that change how tensor storage is computed and written back:

- `ElementKind.INTEGRAL`: signed and unsigned integers
- `ElementKind.INEXACT`: floating point and complex numbers

Tensor methods whose behaviour depends on the element type are dispatched on
this kind through the control-path mechanism.
"""

from enum import Enum

import numpy as np


DEFAULT_DTYPE = np.dtype(np.float64)
"""Element dtype used when a tensor is constructed without an explicit one."""


class ElementKind(Enum):
    """
    Enumeration of supported element categories.

    Attributes
    ----------
    INTEGRAL : ElementKind
        Integer storage. Results are range-checked and truncated toward zero.
    INEXACT : ElementKind
        Floating point or complex storage. Results are stored as computed.
    """

    INTEGRAL = "integral"
    INEXACT = "inexact"

    @classmethod
    def of(cls, dtype) -> "ElementKind":
        """
        Classify a dtype-like object.

        Parameters
        ----------
        dtype : dtype-like
            Anything accepted by `numpy.dtype`.

        Returns
        -------
        ElementKind
            The category of `dtype`.

        Raises
        ------
        TypeError
            If `dtype` is not a numeric integer, floating or complex type.
        """
        dt = np.dtype(dtype)
        if dt.kind in ("i", "u"):
            return cls.INTEGRAL
        if dt.kind in ("f", "c"):
            return cls.INEXACT
        raise TypeError(f"Unsupported tensor element dtype: {dt}")
