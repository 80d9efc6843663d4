from ._tensor_function import TensorFunction
from ._tensor_function_antiderivative import tensor_function_antiderivative
from ._tensor_function_compose import tensor_function_compose
from ._tensor_function_constants import tensor_function_constant
from ._tensor_function_subtract import tensor_function_subtract


def tensor_function_integral(
    f: TensorFunction,
    mode: int,
    lower,
    upper,
) -> TensorFunction:
    """Definite integral along one variable.

    Computes ``F(..., upper, ...) - F(..., lower, ...)`` where ``F`` is the
    antiderivative of ``f`` along ``mode``.

    Parameters
    ----------
    f : TensorFunction
        Integrand.
    mode : int
        Variable of integration.
    lower, upper : Scalar, number or TensorFunction
        Limits. Function-valued limits may depend on the other variables.

    Returns
    -------
    TensorFunction
        Function of the remaining variables (dimension 1 along ``mode``).

    Examples
    --------
    >>> f = tensor_function(torch.tensor([0.0, 0.0, 3.0]))  # 3x^2
    >>> tensor_function_integral(f, 0, 0.0, 2.0).coeffs
    tensor([8.], dtype=torch.float64)
    """
    if not isinstance(lower, TensorFunction):
        lower = tensor_function_constant(lower)

    if not isinstance(upper, TensorFunction):
        upper = tensor_function_constant(upper)

    antiderivative = tensor_function_antiderivative(f, mode)

    return tensor_function_subtract(
        tensor_function_compose(antiderivative, upper, mode),
        tensor_function_compose(antiderivative, lower, mode),
    )
