"""Total derivatives through a graph of dependent variables."""

import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from torchcalculus.scalar import DivisionByZeroError, Real, scalar_divide
from torchcalculus.tensor import tensor_condense

from ._exceptions import (
    CyclicDependencyError,
    ImplicitDerivativeWarning,
    UnsupportedOperationError,
)
from ._tensor_function import TensorFunction
from ._tensor_function_constants import (
    tensor_function_constant,
    tensor_function_one,
    tensor_function_zero,
)
from ._tensor_function_gradient import tensor_function_gradient
from ._tensor_function_properties import tensor_function_is_zero
from ._vector_function import VectorFunction
from ._vector_function_dot import vector_function_dot


@dataclass
class _TotalDerivativeState:
    """State of a single total derivative computation.

    Attributes
    ----------
    inner : list of TensorFunction or None
        ``inner[m]`` defines variable ``m`` in terms of the others; ``None``
        marks an independent variable.
    dependencies : dict
        Transitively closed set of variables each variable depends on.
    memo : dict
        ``d x_num / d x_denom`` keyed by ``(num, denom)``.
    inverted : int, optional
        Independent variable whose derivative was obtained by inversion.
    inversions : list
        ``(num, denom)`` pairs taken as reciprocals, in order.
    """

    inner: List[Optional[TensorFunction]]
    dependencies: Dict[int, Set[int]]
    memo: Dict[Tuple[int, int], TensorFunction] = field(default_factory=dict)
    inverted: Optional[int] = None
    inversions: List[Tuple[int, int]] = field(default_factory=list)


def _dependencies(inner: Sequence[Optional[TensorFunction]]) -> Dict[int, Set[int]]:
    # Variables a defining function depends on: axes of size > 1.
    dependencies = {}
    for mode, g in enumerate(inner):
        if g is None:
            dependencies[mode] = set()
        else:
            dependencies[mode] = {
                axis for axis, size in enumerate(g.coeffs.shape) if size > 1
            }

    return dependencies


def _validate(dependencies: Dict[int, Set[int]]) -> None:
    # Depth-first search, closing every dependency set transitively.
    validated = set()
    in_progress = set()

    def visit(mode: int) -> None:
        if mode in validated:
            return

        if mode in in_progress:
            raise CyclicDependencyError(
                f"Variable {mode} depends on itself"
            )

        in_progress.add(mode)

        closure = set()
        for dependency in sorted(dependencies.setdefault(mode, set())):
            visit(dependency)
            closure |= dependencies[dependency]
        dependencies[mode] |= closure

        in_progress.discard(mode)
        validated.add(mode)

    for mode in list(dependencies):
        visit(mode)


def _reciprocal(f: TensorFunction, num: int, denom: int) -> TensorFunction:
    if any(size > 1 for size in tensor_condense(f.coeffs)):
        raise UnsupportedOperationError(
            f"d x_{num} / d x_{denom} is the reciprocal of a non-constant "
            f"derivative"
        )

    value = f.coeffs.reshape(-1)[0]
    if value == 0:
        raise DivisionByZeroError(
            f"d x_{denom} / d x_{num} is zero and cannot be inverted"
        )

    return tensor_function_constant(scalar_divide(Real(1.0), value))


def _derivative_of_variable(
    num: int,
    denom: int,
    state: _TotalDerivativeState,
) -> TensorFunction:
    # d x_num / d x_denom
    if num == denom:
        return tensor_function_one()

    if (num, denom) in state.memo:
        return state.memo[(num, denom)]

    dependencies = state.dependencies
    if dependencies.get(num):
        result = _total_derivative(state.inner[num], denom, state)
        state.memo[(num, denom)] = result
        return result

    if num not in dependencies.get(denom, ()):
        zero = tensor_function_zero()
        state.memo[(num, denom)] = zero
        state.memo[(denom, num)] = zero
        return zero

    # x_denom is defined in terms of the independent x_num.
    if state.inverted is not None and state.inverted != num:
        raise UnsupportedOperationError(
            f"Variables {state.inverted} and {num} both need an implicit "
            f"derivative through variable {denom}"
        )
    state.inverted = num
    state.inversions.append((num, denom))

    forward = _total_derivative(state.inner[denom], num, state)
    result = _reciprocal(forward, num, denom)

    state.memo[(denom, num)] = forward
    state.memo[(num, denom)] = result

    return result


def _total_derivative(
    f: TensorFunction,
    mode: int,
    state: _TotalDerivativeState,
) -> TensorFunction:
    gradient = tensor_function_gradient(f)

    tangent = []
    for m, partial in enumerate(gradient):
        if f.coeffs.shape[m] < 2 or tensor_function_is_zero(partial):
            tangent.append(tensor_function_zero())
        else:
            tangent.append(_derivative_of_variable(m, mode, state))

    return vector_function_dot(gradient, VectorFunction(components=tangent))


def tensor_function_total_derivative(
    f: TensorFunction,
    mode: int,
    inner: Sequence[Optional[TensorFunction]],
) -> TensorFunction:
    """Total derivative with respect to one variable, by the chain rule.

    Some variables may be defined as functions of the others. The total
    derivative is

        df/dx_t = sum_m (df/dx_m) * (dx_m/dx_t)

    over every variable ``m`` on which ``f`` has non-zero degree, where
    ``dx_m/dx_t`` is itself a total derivative through ``inner[m]``.

    Parameters
    ----------
    f : TensorFunction
        Function to differentiate.
    mode : int
        Variable ``t`` to differentiate with respect to.
    inner : sequence of TensorFunction or None
        ``inner[m]`` defines variable ``m`` in terms of the others; ``None``
        (or a missing trailing entry) marks ``m`` as independent. Variable
        ``m`` depends on variable ``a`` when ``inner[m]`` has dimension
        greater than 1 along axis ``a``.

    Returns
    -------
    TensorFunction
        The total derivative.

    Raises
    ------
    CyclicDependencyError
        If a variable depends on itself through the inner functions.
    UnsupportedOperationError
        If an implicit derivative is the reciprocal of a non-constant
        function, or more than one independent variable must be inverted.
    DivisionByZeroError
        If an implicit derivative is the reciprocal of zero.

    Warns
    -----
    ImplicitDerivativeWarning
        When ``t`` depends on an independent variable ``m`` of ``f`` and
        ``dx_m/dx_t`` is taken as ``1 / (dx_t/dx_m)``.

    Notes
    -----
    Intermediate derivatives ``dx_m/dx_t`` are memoized for the duration of
    one call, so shared sub-dependencies are differentiated once. Nothing
    is cached between calls.

    Examples
    --------
    w = x*y*t with x = y*z, y = t and z = t over (x, y, z, t):

    >>> w = tensor_function_from_coefficients([2, 2, 1, 2], [0] * 7 + [1])
    >>> x = tensor_function_from_coefficients([1, 2, 2], [0, 0, 0, 1])
    >>> t = tensor_function_from_coefficients([1, 1, 1, 2], [0, 1])
    >>> dw = tensor_function_total_derivative(w, 3, [x, t, t])
    >>> dw(114.0, 22.0, 342.0, 43.0)
    Real(value=351754.0)
    """
    inner = list(inner)

    dependencies = _dependencies(inner)
    _validate(dependencies)

    state = _TotalDerivativeState(inner=inner, dependencies=dependencies)

    try:
        return _total_derivative(f, mode, state)
    finally:
        for num, denom in state.inversions:
            warnings.warn(
                f"d x_{num} / d x_{denom} is computed as the reciprocal of "
                f"d x_{denom} / d x_{num}",
                ImplicitDerivativeWarning,
                stacklevel=2,
            )
