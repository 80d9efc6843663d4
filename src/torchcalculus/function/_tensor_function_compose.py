import torch

from torchcalculus.tensor import multi_indices, tensor_multiply, tensor_resize
from torchcalculus.tensor._tensor import _with_rank

from ._exceptions import DomainError
from ._tensor_function import TensorFunction


def tensor_function_compose(
    f: TensorFunction,
    g: TensorFunction,
    mode: int,
) -> TensorFunction:
    """Substitute ``g`` for variable ``mode`` of ``f``.

    Writing ``f = sum_i c_i * x_mode^i`` with coefficient functions ``c_i``
    of the other variables, the result is ``sum_i c_i * g^i``. ``g`` may
    depend on any variables, including ``x_mode`` itself.

    Parameters
    ----------
    f : TensorFunction
        Outer function.
    g : TensorFunction
        Inner function.
    mode : int
        Variable of ``f`` to replace.

    Returns
    -------
    TensorFunction
        Composition ``f(..., g(...), ...)``. Its rank is the larger of the
        two ranks; with ``p`` the degree of ``f`` in ``mode``, axis ``m``
        has dimension ``(f_m - 1) + (g_m - 1) * p + 1``, where ``f_mode``
        counts as 1. ``f`` itself is returned when ``p`` is 0.

    Raises
    ------
    DomainError
        If ``mode`` is negative or not a variable of ``f``.

    Examples
    --------
    >>> f = tensor_function(torch.tensor([0.0, 0.0, 1.0]))  # x^2
    >>> g = tensor_function(torch.tensor([1.0, 1.0]))  # 1 + x
    >>> tensor_function_compose(f, g, 0).coeffs
    tensor([1., 2., 1.], dtype=torch.float64)
    """
    coeffs = f.coeffs

    if mode < 0 or mode >= coeffs.dim():
        raise DomainError(
            f"Cannot substitute variable {mode} of a function of "
            f"{coeffs.dim()} variables"
        )

    p = coeffs.shape[mode] - 1
    if p == 0:
        return f

    inner = g.coeffs
    rank = max(coeffs.dim(), inner.dim())
    dtype = torch.promote_types(coeffs.dtype, inner.dtype)
    coeffs = _with_rank(coeffs, rank).to(dtype)
    inner = _with_rank(inner, rank).to(dtype)

    # g^0, ..., g^p stacked along a leading axis, each of the shape of g^p
    span = [(size - 1) * p + 1 for size in inner.shape]
    power = torch.ones((), dtype=dtype)
    powers = [tensor_resize(power, span)]
    for _ in range(p):
        power = tensor_multiply(power, inner)
        powers.append(tensor_resize(power, span))
    powers = torch.stack(powers)

    dims = [size + extent - 1 for size, extent in zip(coeffs.shape, span)]
    dims[mode] = span[mode]
    result = torch.zeros(dims, dtype=dtype)

    # Each strand along mode is a polynomial in g, shifted by its index
    # in the other variables.
    for index in multi_indices(coeffs.shape, skip=mode):
        strand = coeffs[index[:mode] + (slice(None),) + index[mode + 1 :]]
        if not torch.any(strand != 0):
            continue

        region = tuple(slice(i, i + n) for i, n in zip(index, span))
        result[region] += torch.tensordot(strand, powers, dims=1)

    return TensorFunction(coeffs=result)
