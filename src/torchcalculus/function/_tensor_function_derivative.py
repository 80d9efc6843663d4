from torchcalculus.linear_algebra import differentiation_matrix
from torchcalculus.tensor import tensor_mode_product

from ._exceptions import DegreeError, DomainError
from ._tensor_function import TensorFunction
from ._tensor_function_constants import tensor_function_zero


def tensor_function_derivative(
    f: TensorFunction,
    mode: int,
    order: int = 1,
) -> TensorFunction:
    """Partial derivative along one variable.

    Parameters
    ----------
    f : TensorFunction
        Function to differentiate.
    mode : int
        Variable to differentiate with respect to.
    order : int, optional
        Number of differentiations. Default is 1.

    Returns
    -------
    TensorFunction
        ``d^order f / dx_mode^order``. Axis ``mode`` shrinks by ``order``.
        ``f`` itself for ``order == 0``; the zero function when ``order``
        exceeds the degree in ``mode`` or ``f`` does not depend on
        ``x_mode`` at all.

    Raises
    ------
    DomainError
        If ``mode`` is negative.
    DegreeError
        If ``order`` is negative.

    Examples
    --------
    >>> f = tensor_function(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> tensor_function_derivative(f, 0).coeffs  # 2 + 6x
    tensor([2., 6.], dtype=torch.float64)
    """
    if mode < 0:
        raise DomainError(f"Variable index must be non-negative, got {mode}")

    if order < 0:
        raise DegreeError(f"Derivative order must be non-negative, got {order}")

    if order == 0:
        return f

    coeffs = f.coeffs
    if mode >= coeffs.dim() or order >= coeffs.shape[mode]:
        return tensor_function_zero(coeffs.dtype)

    degree = coeffs.shape[mode] - 1
    real_dtype = coeffs.real.dtype if coeffs.is_complex() else coeffs.dtype
    d = differentiation_matrix(degree, order, dtype=real_dtype)

    return TensorFunction(coeffs=tensor_mode_product(d, coeffs, mode))
