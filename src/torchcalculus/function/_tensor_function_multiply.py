from torchcalculus.tensor import tensor_multiply

from ._tensor_function import TensorFunction


def tensor_function_multiply(
    f: TensorFunction,
    g: TensorFunction,
) -> TensorFunction:
    """Multiply two tensor functions.

    The coefficient tensor of the product is the multi-dimensional
    convolution of the operands: along every variable the degrees add, so
    the result has dimension ``f_m + g_m - 1`` on axis ``m``.

    Parameters
    ----------
    f, g : TensorFunction
        Factors.

    Returns
    -------
    TensorFunction
        Product ``f * g``.

    Examples
    --------
    >>> f = tensor_function(torch.tensor([1.0, 1.0]))  # 1 + x
    >>> tensor_function_multiply(f, f).coeffs
    tensor([1., 2., 1.], dtype=torch.float64)
    """
    return TensorFunction(coeffs=tensor_multiply(f.coeffs, g.coeffs))
