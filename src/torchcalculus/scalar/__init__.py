"""Real and complex scalars with field-like operations."""

from ._exceptions import DivisionByZeroError, ScalarError
from ._scalar import Complex, Real, Scalar, is_complex, scalar
from ._scalar_arithmetic import (
    scalar_add,
    scalar_divide,
    scalar_multiply,
    scalar_negate,
    scalar_subtract,
)
from ._scalar_conversion import scalar_from_tensor, scalar_to_tensor
from ._scalar_properties import (
    scalar_abs,
    scalar_conjugate,
    scalar_equal,
    scalar_imag,
    scalar_real,
)

__all__ = [
    "Complex",
    "DivisionByZeroError",
    "Real",
    "Scalar",
    "ScalarError",
    "is_complex",
    "scalar",
    "scalar_abs",
    "scalar_add",
    "scalar_conjugate",
    "scalar_divide",
    "scalar_equal",
    "scalar_from_tensor",
    "scalar_imag",
    "scalar_multiply",
    "scalar_negate",
    "scalar_real",
    "scalar_subtract",
    "scalar_to_tensor",
]
