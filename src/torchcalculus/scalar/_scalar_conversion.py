from __future__ import annotations

from typing import Optional

import torch
from torch import Tensor

from ._exceptions import ScalarError
from ._scalar import Complex, Real, Scalar, _dtype, scalar


def scalar_to_tensor(
    value,
    dtype: Optional[torch.dtype] = None,
) -> Tensor:
    """Convert a scalar to a 0-d tensor.

    Parameters
    ----------
    value : Scalar or number
        Value to convert.
    dtype : torch.dtype, optional
        Target dtype. Defaults to ``torch.float64`` for Real and
        ``torch.complex128`` for Complex. A complex value is never
        narrowed to a real dtype; the dtype is promoted instead.

    Returns
    -------
    Tensor
        0-d tensor holding the value.
    """
    value = scalar(value)

    target = _dtype(value)
    if dtype is not None:
        target = torch.promote_types(dtype, target) if value.im else dtype

    if target.is_complex:
        return torch.tensor(complex(value.re, value.im), dtype=target)

    return torch.tensor(value.re, dtype=target)


def scalar_from_tensor(t: Tensor) -> Scalar:
    """Convert a single-element tensor to a scalar.

    Complex dtypes give ``Complex`` (even with a zero imaginary part),
    every other dtype gives ``Real``.

    Raises
    ------
    ScalarError
        If the tensor does not hold exactly one element.
    """
    if t.numel() != 1:
        raise ScalarError(
            f"Expected a single-element tensor, got shape {tuple(t.shape)}"
        )

    if t.is_complex():
        value = complex(t.reshape(()).item())
        return Complex(value.real, value.imag)

    return Real(float(t.reshape(()).item()))
