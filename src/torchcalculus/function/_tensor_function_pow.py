import numbers

import torch

from ._exceptions import UnsupportedOperationError
from ._tensor_function import TensorFunction
from ._tensor_function_multiply import tensor_function_multiply


def tensor_function_pow(f: TensorFunction, n: int) -> TensorFunction:
    """Raise a tensor function to a non-negative integer power.

    Uses binary exponentiation (repeated squaring).

    Parameters
    ----------
    f : TensorFunction
        Base.
    n : int
        Non-negative exponent.

    Returns
    -------
    TensorFunction
        ``f`` raised to ``n``. For ``n == 0`` this is the constant 1 with
        the arity of ``f`` (every dimension 1).

    Raises
    ------
    UnsupportedOperationError
        If ``n`` is negative or not an integer; use
        ``tensor_function_power`` for a truncated series in that case.

    Examples
    --------
    >>> f = tensor_function(torch.tensor([1.0, 1.0]))  # 1 + x
    >>> tensor_function_pow(f, 3).coeffs
    tensor([1., 3., 3., 1.], dtype=torch.float64)
    """
    if not isinstance(n, numbers.Integral):
        raise UnsupportedOperationError(
            f"Exponent must be an integer, got {n!r}"
        )

    if n < 0:
        raise UnsupportedOperationError(
            f"Exponent must be non-negative, got {n}"
        )

    if n == 0:
        return TensorFunction(
            coeffs=torch.ones((1,) * f.coeffs.dim(), dtype=f.coeffs.dtype)
        )

    if n == 1:
        return f

    result = None
    base = f

    while n > 0:
        if n & 1:
            if result is None:
                result = base
            else:
                result = tensor_function_multiply(result, base)
        n >>= 1
        if n > 0:
            base = tensor_function_multiply(base, base)

    return result
