from typing import Optional, Sequence

import torch

from torchcalculus.tensor import tensor, tensor_from_derivatives

from ._tensor_function import TensorFunction


def tensor_function_from_coefficients(
    dims: Sequence[int],
    values: Sequence,
    dtype: Optional[torch.dtype] = None,
) -> TensorFunction:
    """Create a tensor function from a flat coefficient sequence.

    Parameters
    ----------
    dims : sequence of int
        Degree plus one per variable.
    values : sequence of numbers or scalars
        Coefficients in storage order, variable 0 varying fastest.
    dtype : torch.dtype, optional
        Coefficient dtype.

    Returns
    -------
    TensorFunction
        Function with coefficient tensor of shape ``dims``.

    Examples
    --------
    x*y*t over (x, y, z, t):

    >>> w = tensor_function_from_coefficients(
    ...     [2, 2, 1, 2], [0, 0, 0, 0, 0, 0, 0, 1]
    ... )
    >>> w(2.0, 3.0, 0.0, 4.0)
    Real(value=24.0)
    """
    return TensorFunction(coeffs=tensor(dims, values, dtype))


def tensor_function_from_derivatives(
    dims: Sequence[int],
    values: Sequence,
    dtype: Optional[torch.dtype] = None,
) -> TensorFunction:
    """Create a tensor function from mixed partial derivatives at the origin.

    The value of multi-index ``(i_0, ..., i_{k-1})`` is divided by
    ``i_0! * ... * i_{k-1}!`` to give the Taylor coefficient.

    Examples
    --------
    >>> f = tensor_function_from_derivatives([3], [1, 1, 1])  # e^x to x^2
    >>> f.coeffs
    tensor([1.0000, 1.0000, 0.5000], dtype=torch.float64)
    """
    return TensorFunction(coeffs=tensor_from_derivatives(dims, values, dtype))
