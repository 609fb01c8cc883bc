"""
Shape-, axis- and coordinate-related exceptions for KeyTensor.

This module defines the error taxonomy raised by tensor operations when a
precondition is violated. Every check happens before any storage is touched,
so a raised error always leaves the tensor exactly as it was.

These errors subclass the closest built-in exception so that callers may
catch either the specific KeyTensor type or the generic Python one.
"""


class ShapeError(ValueError):
    """
    Raised when operand shapes disagree where equality is required.

    Typical triggers are tensor-tensor arithmetic between different `dim`
    sequences, weight sequences whose length differs from the target axis
    size, and non-positive axis sizes.
    """


class AxisError(ValueError, IndexError):
    """
    Raised when an axis-from-the-right value lies outside ``[0, rank)``.

    Attributes
    ----------
    axis : int
        The offending axis value.
    rank : int
        Rank of the tensor the axis was applied to.
    """

    def __init__(self, axis: int, rank: int) -> None:
        """
        Initialize the AxisError.

        Parameters
        ----------
        axis : int
            The axis value that was supplied.
        rank : int
            Number of axes of the tensor.
        """
        super().__init__(f"axis {axis} is out of bounds for tensor of rank {rank}")
        self.axis = axis
        self.rank = rank


class CoordinateError(IndexError):
    """
    Raised when a coordinate tuple has the wrong rank or a component is out
    of range, or when a flat location lies outside ``[0, nelem)``.
    """


class ReversedSubtractionWarning(UserWarning):
    """
    Emitted when ``scalar - tensor`` is evaluated.

    The expression is computed as ``tensor - scalar`` (not its negation),
    which is almost never what a reader of the call site expects.
    """
