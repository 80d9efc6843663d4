import torch

from ._tensor_function import TensorFunction


def tensor_function_arity(f: TensorFunction) -> int:
    """Number of variables, the rank of the coefficient tensor."""
    return f.coeffs.dim()


def tensor_function_degree(f: TensorFunction, mode: int) -> int:
    """Degree bound in variable ``mode``.

    This is ``coeffs.shape[mode] - 1``, which may exceed the true degree
    when trailing coefficients are zero. Variables beyond the arity have
    degree 0.
    """
    if mode >= f.coeffs.dim():
        return 0

    return f.coeffs.shape[mode] - 1


def tensor_function_is_zero(f: TensorFunction) -> bool:
    """True when every coefficient is exactly zero."""
    return not bool(torch.any(f.coeffs != 0))
