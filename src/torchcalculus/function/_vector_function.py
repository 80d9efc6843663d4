"""Vectors of tensor functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from ._tensor_function import TensorFunction


@dataclass(frozen=True, eq=False)
class VectorFunction:
    """Ordered collection of tensor functions.

    Attributes
    ----------
    components : tuple of TensorFunction
        Component functions. May be empty.

    Examples
    --------
    >>> v = vector_function(tensor_function_variable(0), tensor_function_variable(1))
    >>> len(v), v.arity
    (2, 2)
    >>> v(3.0, 4.0)
    (Real(value=3.0), Real(value=4.0))
    """

    components: Tuple[TensorFunction, ...]

    def __post_init__(self):
        object.__setattr__(self, "components", tuple(self.components))

    @property
    def arity(self) -> int:
        """Largest arity among the components, 0 when empty."""
        return max((f.coeffs.dim() for f in self.components), default=0)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[TensorFunction]:
        return iter(self.components)

    def __getitem__(self, index: int) -> TensorFunction:
        return self.components[index]

    def __call__(self, *args):
        from ._vector_function_evaluate import vector_function_evaluate

        return vector_function_evaluate(self, args)


def vector_function(*components: TensorFunction) -> VectorFunction:
    """Create a vector function from its components."""
    return VectorFunction(components=components)
