from ._tensor_function import TensorFunction
from ._tensor_function_derivative import tensor_function_derivative
from ._vector_function import VectorFunction


def tensor_function_gradient(f: TensorFunction) -> VectorFunction:
    """Vector of first partial derivatives, one per variable.

    Examples
    --------
    >>> f = tensor_function_from_coefficients([3, 3], [0, 0, 1, 0, 0, 0, 1, 0, 0])
    >>> tensor_function_gradient(f)(3.0, 4.0)  # x^2 + y^2
    (Real(value=6.0), Real(value=8.0))
    """
    return VectorFunction(
        components=tuple(
            tensor_function_derivative(f, mode)
            for mode in range(f.coeffs.dim())
        )
    )
