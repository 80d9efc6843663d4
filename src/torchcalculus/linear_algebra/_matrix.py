from __future__ import annotations

from typing import Optional, Sequence

import torch
from torch import Tensor

from torchcalculus.tensor._exceptions import InvalidShapeError
from torchcalculus.tensor._tensor import _as_values


def matrix(
    rows: int,
    cols: int,
    values: Optional[Sequence] = None,
    dtype: Optional[torch.dtype] = None,
) -> Tensor:
    """Create a matrix from row-major values.

    Parameters
    ----------
    rows, cols : int
        Matrix shape.
    values : sequence of numbers or scalars, optional
        ``rows * cols`` entries in row-major order, entry ``(r, c)`` at
        position ``r * cols + c``. Zeros when omitted.
    dtype : torch.dtype, optional
        Entry dtype. Defaults to ``torch.float64``, or ``torch.complex128``
        when any value is complex.

    Returns
    -------
    Tensor
        Matrix, shape (rows, cols).

    Raises
    ------
    InvalidShapeError
        If the number of values differs from ``rows * cols``.
    """
    if values is None:
        return torch.zeros(rows, cols, dtype=dtype or torch.float64)

    data = _as_values(values, dtype)
    if data.numel() != rows * cols:
        raise InvalidShapeError(
            f"Expected {rows * cols} values for a {rows}x{cols} matrix, "
            f"got {data.numel()}"
        )

    return data.reshape(rows, cols)


def matrix_add(a: Tensor, b: Tensor) -> Tensor:
    """Add two matrices of equal shape."""
    _check_equal_shapes(a, b)

    return a + b


def matrix_subtract(a: Tensor, b: Tensor) -> Tensor:
    """Subtract two matrices of equal shape."""
    _check_equal_shapes(a, b)

    return a - b


def matrix_multiply(a: Tensor, b: Tensor) -> Tensor:
    """Matrix product ``a @ b``.

    Raises
    ------
    InvalidShapeError
        If the column count of ``a`` differs from the row count of ``b``.
    """
    if a.dim() != 2 or b.dim() != 2 or a.shape[1] != b.shape[0]:
        raise InvalidShapeError(
            f"Cannot multiply matrices of shapes {tuple(a.shape)} "
            f"and {tuple(b.shape)}"
        )

    dtype = torch.promote_types(a.dtype, b.dtype)

    return a.to(dtype) @ b.to(dtype)


def matrix_transpose(a: Tensor) -> Tensor:
    """Transpose of a matrix, as a new contiguous tensor."""
    return a.transpose(0, 1).contiguous()


def _check_equal_shapes(a: Tensor, b: Tensor) -> None:
    if a.shape != b.shape:
        raise InvalidShapeError(
            f"Shape mismatch: {tuple(a.shape)} and {tuple(b.shape)}"
        )
