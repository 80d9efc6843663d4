from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import torch
from torch import Tensor

from torchcalculus.scalar import Complex, scalar

from ._exceptions import InvalidShapeError


def _as_values(values, dtype: Optional[torch.dtype] = None) -> Tensor:
    # Flat 1-D copy of numbers, scalars or a tensor.
    if isinstance(values, Tensor):
        data = values.detach().clone().reshape(-1)
        if dtype is not None:
            return data.to(dtype)
        if not (data.is_floating_point() or data.is_complex()):
            return data.to(torch.float64)
        return data

    values = [scalar(v) for v in values]
    if dtype is None:
        if any(isinstance(v, Complex) for v in values):
            dtype = torch.complex128
        else:
            dtype = torch.float64

    if dtype.is_complex:
        return torch.tensor(
            [complex(v.re, v.im) for v in values], dtype=dtype
        ).reshape(-1)

    if any(v.im != 0.0 for v in values):
        raise InvalidShapeError(
            f"Cannot store complex values in a tensor of dtype {dtype}"
        )

    return torch.tensor([v.re for v in values], dtype=dtype).reshape(-1)


def _reverse_axes(t: Tensor) -> Tensor:
    if t.dim() < 2:
        return t
    return t.permute(tuple(range(t.dim() - 1, -1, -1)))


def _promote(a: Tensor, b: Tensor) -> Tuple[Tensor, Tensor]:
    dtype = torch.promote_types(a.dtype, b.dtype)
    return a.to(dtype), b.to(dtype)


def _with_rank(t: Tensor, rank: int) -> Tensor:
    # Append trailing size-1 axes.
    return t.reshape((*t.shape, *([1] * (rank - t.dim()))))


def _outer_product(vectors: Sequence[Tensor], dtype: torch.dtype) -> Tensor:
    # result[i_0, ..., i_{k-1}] = vectors[0][i_0] * ... * vectors[k-1][i_{k-1}]
    result = torch.ones((), dtype=dtype)
    for v in vectors:
        result = result.unsqueeze(-1) * v.to(dtype)
    return result


def _check_dims(dims: Sequence[int]) -> Tuple[int, ...]:
    dims = tuple(int(d) for d in dims)
    if any(d < 1 for d in dims):
        raise InvalidShapeError(f"Dimensions must be at least 1, got {dims}")
    return dims


def tensor(
    dims: Sequence[int],
    values: Optional[Sequence] = None,
    dtype: Optional[torch.dtype] = None,
) -> Tensor:
    """Create a coefficient tensor from a flat sequence.

    Parameters
    ----------
    dims : sequence of int
        Dimension vector ``[d_0, ..., d_{k-1}]``, each at least 1. An empty
        vector creates a 0-d tensor holding one value.
    values : sequence of numbers or scalars, or Tensor, optional
        ``d_0 * ... * d_{k-1}`` values in storage order: the value of
        multi-index ``(i_0, ..., i_{k-1})`` sits at position
        ``i_0 + i_1*d_0 + i_2*d_0*d_1 + ...`` (dimension 0 varies fastest).
        Zeros when omitted.
    dtype : torch.dtype, optional
        Defaults to ``torch.float64``, or ``torch.complex128`` when any
        value is complex.

    Returns
    -------
    Tensor
        Tensor of shape ``dims``, with ``t[i_0, ..., i_{k-1}]`` holding the
        value of that multi-index. The data is copied.

    Raises
    ------
    InvalidShapeError
        If a dimension is smaller than 1 or the number of values differs
        from the product of the dimensions.

    Examples
    --------
    >>> t = tensor([2, 3], [1, 2, 3, 4, 5, 6])
    >>> t[1, 0], t[0, 1]
    (tensor(2., dtype=torch.float64), tensor(3., dtype=torch.float64))
    """
    dims = _check_dims(dims)
    size = math.prod(dims)

    if values is None:
        return torch.zeros(dims, dtype=dtype or torch.float64)

    data = _as_values(values, dtype)
    if data.numel() != size:
        raise InvalidShapeError(
            f"Expected {size} values for dimensions {list(dims)}, "
            f"got {data.numel()}"
        )

    return _reverse_axes(data.reshape(dims[::-1])).contiguous()


def tensor_values(t: Tensor) -> Tensor:
    """Flat copy of a tensor's values in storage order (dimension 0 fastest)."""
    return _reverse_axes(t).reshape(-1).clone()


def tensor_from_derivatives(
    dims: Sequence[int],
    values: Sequence,
    dtype: Optional[torch.dtype] = None,
) -> Tensor:
    """Create a coefficient tensor from derivatives at the origin.

    The value of multi-index ``(i_0, ..., i_{k-1})`` is the mixed partial
    derivative ``d^(i_0 + ... + i_{k-1}) f / dx_0^i_0 ... dx_{k-1}^i_{k-1}``
    at ``x = 0``; the matching Taylor coefficient is that value divided by
    ``i_0! * ... * i_{k-1}!``.

    Parameters
    ----------
    dims : sequence of int
        Dimension vector.
    values : sequence of numbers or scalars, or Tensor
        Derivatives in storage order.
    dtype : torch.dtype, optional
        Coefficient dtype.

    Returns
    -------
    Tensor
        Coefficient tensor of shape ``dims``.

    Examples
    --------
    >>> tensor_from_derivatives([4], [1, 1, 1, 1])  # e^x up to x^3
    tensor([1.0000, 1.0000, 0.5000, 0.1667], dtype=torch.float64)
    """
    t = tensor(dims, values, dtype)

    reciprocals = []
    for size in t.shape:
        factorials = torch.cumprod(
            torch.arange(size, dtype=torch.float64).clamp(min=1.0), dim=0
        )
        reciprocals.append(1.0 / factorials)

    real_dtype = t.real.dtype if t.is_complex() else t.dtype

    return t * _outer_product(reciprocals, real_dtype)
