"""Hypothesis strategies for tensor function testing."""

from ._complex_numbers import complex_numbers
from ._integers_as_floats import integers_as_floats
from ._real_numbers import real_numbers
from ._shapes import shapes
from ._tensor_functions import tensor_functions
from ._tensors import tensors

__all__ = [
    # Numeric strategies
    "complex_numbers",
    "integers_as_floats",
    "real_numbers",
    # Tensor strategies
    "shapes",
    "tensors",
    # Function strategies
    "tensor_functions",
]
