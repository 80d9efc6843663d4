from typing import Optional, Sequence

from torchcalculus.linear_algebra import integration_matrix, resize_matrix
from torchcalculus.tensor import tensor_mode_product
from torchcalculus.tensor._tensor import _with_rank

from ._exceptions import DegreeError, DomainError
from ._tensor_function import TensorFunction
from ._tensor_function_add import tensor_function_add
from ._tensor_function_constants import tensor_function_constant
from ._tensor_function_properties import tensor_function_degree


def tensor_function_antiderivative(
    f: TensorFunction,
    mode: int,
    order: int = 1,
    constants: Optional[Sequence] = None,
) -> TensorFunction:
    """Antiderivative along one variable.

    Parameters
    ----------
    f : TensorFunction
        Function to integrate.
    mode : int
        Variable to integrate with respect to. A variable beyond the arity
        is added as a new axis.
    order : int, optional
        Number of integrations. Default is 1. Ignored when ``constants``
        is given.
    constants : sequence of Scalar, number or TensorFunction, optional
        Integration constants ``c_0, ..., c_{k-1}``; the order becomes
        ``k`` and ``sum_j c_j * x_mode^j`` is added to the result.
        Function-valued constants must not depend on ``x_mode``. All
        constants are zero when omitted.

    Returns
    -------
    TensorFunction
        Antiderivative. Axis ``mode`` grows by the order.

    Raises
    ------
    DomainError
        If ``mode`` is negative.
    DegreeError
        If ``order`` is negative or a constant depends on ``x_mode``.

    Examples
    --------
    >>> f = tensor_function(torch.tensor([2.0, 6.0]))  # 2 + 6x
    >>> tensor_function_antiderivative(f, 0).coeffs  # 2x + 3x^2
    tensor([0., 2., 3.], dtype=torch.float64)
    >>> tensor_function_antiderivative(f, 0, constants=[1.0]).coeffs
    tensor([1., 2., 3.], dtype=torch.float64)
    """
    if mode < 0:
        raise DomainError(f"Variable index must be non-negative, got {mode}")

    if constants is not None:
        constants = list(constants)
        order = len(constants)

    if order < 0:
        raise DegreeError(
            f"Integration order must be non-negative, got {order}"
        )

    if order == 0:
        return f

    coeffs = f.coeffs
    if mode >= coeffs.dim():
        coeffs = _with_rank(coeffs, mode + 1)

    degree = coeffs.shape[mode] - 1
    real_dtype = coeffs.real.dtype if coeffs.is_complex() else coeffs.dtype
    m = integration_matrix(degree, order, dtype=real_dtype)

    result = TensorFunction(coeffs=tensor_mode_product(m, coeffs, mode))

    if not constants:
        return result

    for j, c in enumerate(constants):
        if not isinstance(c, TensorFunction):
            c = tensor_function_constant(c)

        if tensor_function_degree(c, mode) > 0:
            raise DegreeError(
                f"Integration constant {j} depends on variable {mode}"
            )

        # c_j * x_mode^j: move the constant to index j along mode
        shift = resize_matrix(1, j + 1, before=j, dtype=real_dtype)
        term = tensor_mode_product(shift, _with_rank(c.coeffs, mode + 1), mode)
        result = tensor_function_add(result, TensorFunction(coeffs=term))

    return result
