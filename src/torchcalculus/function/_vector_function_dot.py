from ._tensor_function import TensorFunction
from ._tensor_function_add import tensor_function_add
from ._tensor_function_constants import tensor_function_zero
from ._tensor_function_multiply import tensor_function_multiply
from ._tensor_function_properties import tensor_function_is_zero
from ._vector_function import VectorFunction


def vector_function_dot(u: VectorFunction, v: VectorFunction) -> TensorFunction:
    """Sum of componentwise products.

    Pairs beyond the shorter of the two vectors are ignored, and pairs with
    a zero component are skipped without multiplying.

    Parameters
    ----------
    u, v : VectorFunction
        Vectors to combine.

    Returns
    -------
    TensorFunction
        ``sum_i u[i] * v[i]``; the zero function when no pair contributes.

    Examples
    --------
    >>> x = tensor_function_variable(0)
    >>> y = tensor_function_variable(1)
    >>> vector_function_dot(vector_function(x, y), vector_function(y, x))(2.0, 3.0)
    Real(value=12.0)
    """
    result = tensor_function_zero()

    for f, g in zip(u.components, v.components):
        if tensor_function_is_zero(f) or tensor_function_is_zero(g):
            continue
        result = tensor_function_add(result, tensor_function_multiply(f, g))

    return result
