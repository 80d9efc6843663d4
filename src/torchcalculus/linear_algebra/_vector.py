from __future__ import annotations

from typing import Optional, Sequence

import torch
from torch import Tensor

from torchcalculus.scalar import Scalar, scalar_from_tensor
from torchcalculus.tensor._exceptions import InvalidShapeError
from torchcalculus.tensor._tensor import _as_values

from ._matrix import matrix_multiply


def vector(values: Sequence, dtype: Optional[torch.dtype] = None) -> Tensor:
    """Create a vector, shape (n,), from numbers or scalars."""
    return _as_values(values, dtype)


def matrix_vector_multiply(a: Tensor, v: Tensor) -> Tensor:
    """Matrix-vector product.

    Parameters
    ----------
    a : Tensor
        Matrix, shape (rows, cols).
    v : Tensor
        Vector, shape (cols,).

    Returns
    -------
    Tensor
        Vector, shape (rows,).

    Raises
    ------
    InvalidShapeError
        If ``v`` is not a vector of length ``cols``.
    """
    if v.dim() != 1:
        raise InvalidShapeError(f"Expected a vector, got shape {tuple(v.shape)}")

    return matrix_multiply(a, v.unsqueeze(-1)).squeeze(-1)


def vector_dot(u: Tensor, v: Tensor) -> Scalar:
    """Dot product of two equal-length vectors (no conjugation)."""
    if u.dim() != 1 or u.shape != v.shape:
        raise InvalidShapeError(
            f"Cannot take the dot product of shapes {tuple(u.shape)} "
            f"and {tuple(v.shape)}"
        )

    return scalar_from_tensor(matrix_multiply(u.unsqueeze(0), v.unsqueeze(-1)))
