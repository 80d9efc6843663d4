from torchcalculus.tensor import tensor_divide

from ._exceptions import UnsupportedOperationError
from ._tensor_function import TensorFunction


def tensor_function_divide(f: TensorFunction, c) -> TensorFunction:
    """Divide a tensor function by a scalar.

    Parameters
    ----------
    f : TensorFunction
        Dividend.
    c : Scalar or number
        Divisor.

    Returns
    -------
    TensorFunction
        Quotient ``f / c``.

    Raises
    ------
    UnsupportedOperationError
        If ``c`` is a TensorFunction; the quotient of two polynomials is
        generally not a polynomial.
    DivisionByZeroError
        If ``c`` is zero.
    """
    if isinstance(c, TensorFunction):
        raise UnsupportedOperationError(
            "Division by a tensor function is not supported"
        )

    return TensorFunction(coeffs=tensor_divide(f.coeffs, c))
