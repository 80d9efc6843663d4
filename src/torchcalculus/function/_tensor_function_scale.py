from torchcalculus.tensor import tensor_scale

from ._tensor_function import TensorFunction


def tensor_function_scale(f: TensorFunction, c) -> TensorFunction:
    """Multiply a tensor function by a scalar.

    Parameters
    ----------
    f : TensorFunction
        Function to scale.
    c : Scalar, number or str
        Factor. A complex factor promotes real coefficients to complex.

    Returns
    -------
    TensorFunction
        Scaled function ``c * f``.
    """
    return TensorFunction(coeffs=tensor_scale(f.coeffs, c))
