"""Tensor module exceptions."""


class TensorError(Exception):
    """Base exception for coefficient tensor operations."""

    pass


class InvalidShapeError(TensorError):
    """Structurally incompatible shapes.

    Raised when dimension vectors, value counts or transform matrices do
    not match the tensor they are applied to (e.g., a mode product with a
    matrix whose column count differs from the size of the target axis).
    """

    pass
