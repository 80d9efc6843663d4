from ._tensor_function import TensorFunction


def tensor_function_negate(f: TensorFunction) -> TensorFunction:
    """Negate every coefficient."""
    return TensorFunction(coeffs=-f.coeffs)
