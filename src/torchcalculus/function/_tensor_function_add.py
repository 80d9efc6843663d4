from torchcalculus.tensor import tensor_add

from ._tensor_function import TensorFunction


def tensor_function_add(f: TensorFunction, g: TensorFunction) -> TensorFunction:
    """Add two tensor functions.

    Both coefficient tensors are resized to the elementwise maximum of
    their dimensions; a function of fewer variables is treated as constant
    in the missing ones.

    Parameters
    ----------
    f, g : TensorFunction
        Functions to add.

    Returns
    -------
    TensorFunction
        Sum ``f + g``.

    Examples
    --------
    >>> x = tensor_function_variable(0)
    >>> y = tensor_function_variable(1)
    >>> tensor_function_add(x, y)(2.0, 3.0)
    Real(value=5.0)
    """
    return TensorFunction(coeffs=tensor_add(f.coeffs, g.coeffs))
