from typing import Optional, Sequence

import torch

from torchcalculus.scalar import scalar_to_tensor

from ._exceptions import DomainError
from ._tensor_function import TensorFunction


def tensor_function_zero(dtype: torch.dtype = torch.float64) -> TensorFunction:
    """The zero function, a 0-d coefficient tensor holding 0."""
    return TensorFunction(coeffs=torch.zeros((), dtype=dtype))


def tensor_function_one(
    arity: int = 0,
    dtype: torch.dtype = torch.float64,
) -> TensorFunction:
    """The constant function 1 with ``arity`` size-1 axes."""
    return TensorFunction(coeffs=torch.ones((1,) * arity, dtype=dtype))


def tensor_function_constant(value) -> TensorFunction:
    """Constant function holding a scalar or number.

    Examples
    --------
    >>> tensor_function_constant("1+2i").coeffs
    tensor(1.+2.j, dtype=torch.complex128)
    """
    return TensorFunction(coeffs=scalar_to_tensor(value))


def tensor_function_monomial(
    exponents: Sequence[int],
    coefficient=1.0,
) -> TensorFunction:
    """Single term ``c * x_0^e_0 * ... * x_{k-1}^e_{k-1}``.

    Parameters
    ----------
    exponents : sequence of int
        Non-negative exponent per variable; the arity is ``len(exponents)``.
    coefficient : Scalar or number, optional
        Coefficient ``c``. Default 1.

    Returns
    -------
    TensorFunction
        Function whose coefficient tensor has shape ``e_m + 1`` along every
        axis ``m`` and a single non-zero entry at ``exponents``.

    Examples
    --------
    >>> f = tensor_function_monomial([0, 2, 1])  # y^2 z
    >>> f.coeffs.shape
    torch.Size([1, 3, 2])
    """
    exponents = tuple(int(e) for e in exponents)
    if any(e < 0 for e in exponents):
        raise DomainError(f"Exponents must be non-negative, got {exponents}")

    c = scalar_to_tensor(coefficient)
    coeffs = torch.zeros(tuple(e + 1 for e in exponents), dtype=c.dtype)
    coeffs[exponents] = c

    return TensorFunction(coeffs=coeffs)


def tensor_function_variable(
    mode: int,
    arity: Optional[int] = None,
) -> TensorFunction:
    """The identity function ``x_mode``.

    Parameters
    ----------
    mode : int
        Variable index.
    arity : int, optional
        Number of axes, at least ``mode + 1``. Defaults to ``mode + 1``.

    Examples
    --------
    >>> tensor_function_variable(1)(5.0, 7.0)
    Real(value=7.0)
    """
    if arity is None:
        arity = mode + 1

    if mode < 0 or mode >= arity:
        raise DomainError(
            f"Variable {mode} does not exist for arity {arity}"
        )

    exponents = [0] * arity
    exponents[mode] = 1

    return tensor_function_monomial(exponents)
