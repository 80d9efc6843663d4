"""Multivariate polynomial functions and their calculus."""

from ._exceptions import (
    CyclicDependencyError,
    DegreeError,
    DomainError,
    ImplicitDerivativeWarning,
    TensorFunctionError,
    TruncatedSeriesWarning,
    UnsupportedOperationError,
)
from ._tensor_function import TensorFunction, tensor_function
from ._tensor_function_add import tensor_function_add
from ._tensor_function_antiderivative import tensor_function_antiderivative
from ._tensor_function_compose import tensor_function_compose
from ._tensor_function_constants import (
    tensor_function_constant,
    tensor_function_monomial,
    tensor_function_one,
    tensor_function_variable,
    tensor_function_zero,
)
from ._tensor_function_cos import tensor_function_cos
from ._tensor_function_derivative import tensor_function_derivative
from ._tensor_function_divide import tensor_function_divide
from ._tensor_function_equal import tensor_function_equal
from ._tensor_function_evaluate import tensor_function_evaluate
from ._tensor_function_exp import tensor_function_exp
from ._tensor_function_from_coefficients import (
    tensor_function_from_coefficients,
    tensor_function_from_derivatives,
)
from ._tensor_function_gradient import tensor_function_gradient
from ._tensor_function_integral import tensor_function_integral
from ._tensor_function_multiply import tensor_function_multiply
from ._tensor_function_negate import tensor_function_negate
from ._tensor_function_pow import tensor_function_pow
from ._tensor_function_power import tensor_function_power
from ._tensor_function_properties import (
    tensor_function_arity,
    tensor_function_degree,
    tensor_function_is_zero,
)
from ._tensor_function_scale import tensor_function_scale
from ._tensor_function_sin import tensor_function_sin
from ._tensor_function_subtract import tensor_function_subtract
from ._tensor_function_total_derivative import tensor_function_total_derivative
from ._tensor_function_trim import tensor_function_trim
from ._vector_function import VectorFunction, vector_function
from ._vector_function_antiderivative import vector_function_antiderivative
from ._vector_function_derivative import vector_function_derivative
from ._vector_function_dot import vector_function_dot
from ._vector_function_evaluate import vector_function_evaluate

__all__ = [
    # Types
    "TensorFunction",
    "VectorFunction",
    # Exceptions
    "CyclicDependencyError",
    "DegreeError",
    "DomainError",
    "TensorFunctionError",
    "UnsupportedOperationError",
    # Warnings
    "ImplicitDerivativeWarning",
    "TruncatedSeriesWarning",
    # Constructors
    "tensor_function",
    "tensor_function_constant",
    "tensor_function_from_coefficients",
    "tensor_function_from_derivatives",
    "tensor_function_monomial",
    "tensor_function_one",
    "tensor_function_variable",
    "tensor_function_zero",
    "vector_function",
    # Properties
    "tensor_function_arity",
    "tensor_function_degree",
    "tensor_function_is_zero",
    # Evaluation
    "tensor_function_evaluate",
    "vector_function_evaluate",
    # Arithmetic
    "tensor_function_add",
    "tensor_function_compose",
    "tensor_function_divide",
    "tensor_function_multiply",
    "tensor_function_negate",
    "tensor_function_pow",
    "tensor_function_scale",
    "tensor_function_subtract",
    "vector_function_dot",
    # Calculus
    "tensor_function_antiderivative",
    "tensor_function_derivative",
    "tensor_function_gradient",
    "tensor_function_integral",
    "tensor_function_total_derivative",
    "vector_function_antiderivative",
    "vector_function_derivative",
    # Series
    "tensor_function_cos",
    "tensor_function_exp",
    "tensor_function_power",
    "tensor_function_sin",
    # Comparison
    "tensor_function_equal",
    "tensor_function_trim",
]
