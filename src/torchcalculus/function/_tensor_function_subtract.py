from torchcalculus.tensor import tensor_subtract

from ._tensor_function import TensorFunction


def tensor_function_subtract(
    f: TensorFunction,
    g: TensorFunction,
) -> TensorFunction:
    """Subtract ``g`` from ``f``, resizing both to a common shape."""
    return TensorFunction(coeffs=tensor_subtract(f.coeffs, g.coeffs))
