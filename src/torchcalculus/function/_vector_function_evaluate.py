from typing import Sequence, Tuple

from torchcalculus.scalar import Scalar

from ._tensor_function_evaluate import tensor_function_evaluate
from ._vector_function import VectorFunction


def vector_function_evaluate(
    v: VectorFunction,
    args: Sequence,
) -> Tuple[Scalar, ...]:
    """Evaluate every component at the same point.

    Components with a smaller arity than ``len(args)`` ignore the trailing
    values.

    Raises
    ------
    DomainError
        If fewer values than the arity of some component are given.
    """
    args = list(args)

    return tuple(tensor_function_evaluate(f, args) for f in v.components)
