from ._tensor_function_antiderivative import tensor_function_antiderivative
from ._vector_function import VectorFunction


def vector_function_antiderivative(
    v: VectorFunction,
    mode: int,
    order: int = 1,
) -> VectorFunction:
    """Integrate every component along variable ``mode``.

    All integration constants are zero.
    """
    return VectorFunction(
        components=tuple(
            tensor_function_antiderivative(f, mode, order)
            for f in v.components
        )
    )
