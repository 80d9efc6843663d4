from ._tensor_function_derivative import tensor_function_derivative
from ._vector_function import VectorFunction


def vector_function_derivative(
    v: VectorFunction,
    mode: int,
    order: int = 1,
) -> VectorFunction:
    """Differentiate every component along variable ``mode``."""
    return VectorFunction(
        components=tuple(
            tensor_function_derivative(f, mode, order) for f in v.components
        )
    )
