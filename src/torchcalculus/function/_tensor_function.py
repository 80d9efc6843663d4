from typing import Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._exceptions import TensorFunctionError


@tensorclass
class TensorFunction:
    """Multivariate polynomial backed by a dense coefficient tensor.

    Represents

        f(x_0, ..., x_{k-1}) = sum over (i_0, ..., i_{k-1}) of
            coeffs[i_0, ..., i_{k-1}] * x_0^i_0 * ... * x_{k-1}^i_{k-1}

    where ``k = coeffs.dim()`` is the arity and ``coeffs.shape[m] - 1`` is
    the degree in variable ``m``. A 0-d tensor is a constant function.

    Attributes
    ----------
    coeffs : Tensor
        Coefficients, ``float64`` or ``complex128``.

    Examples
    --------
    x*y + 2 over (x, y):
        TensorFunction(coeffs=torch.tensor([[2.0, 0.0], [0.0, 1.0]]))

    Operator overloading:
        f + g    # tensor_function_add(f, g)
        f - g    # tensor_function_subtract(f, g)
        f * g    # tensor_function_multiply(f, g)
        f * 2.0  # tensor_function_scale(f, 2.0)
        f / 2.0  # tensor_function_divide(f, 2.0)
        -f       # tensor_function_negate(f)
        f ** 3   # tensor_function_pow(f, 3)
        f(x, y)  # tensor_function_evaluate(f, (x, y))
    """

    coeffs: Tensor

    @property
    def arity(self) -> int:
        return self.coeffs.dim()

    def __add__(self, other) -> "TensorFunction":
        from ._tensor_function_add import tensor_function_add

        return tensor_function_add(self, _coerce(other))

    def __radd__(self, other) -> "TensorFunction":
        from ._tensor_function_add import tensor_function_add

        return tensor_function_add(_coerce(other), self)

    def __sub__(self, other) -> "TensorFunction":
        from ._tensor_function_subtract import tensor_function_subtract

        return tensor_function_subtract(self, _coerce(other))

    def __rsub__(self, other) -> "TensorFunction":
        from ._tensor_function_subtract import tensor_function_subtract

        return tensor_function_subtract(_coerce(other), self)

    def __mul__(self, other) -> "TensorFunction":
        from ._tensor_function_multiply import tensor_function_multiply
        from ._tensor_function_scale import tensor_function_scale

        if isinstance(other, TensorFunction):
            return tensor_function_multiply(self, other)
        return tensor_function_scale(self, other)

    def __rmul__(self, other) -> "TensorFunction":
        from ._tensor_function_multiply import tensor_function_multiply
        from ._tensor_function_scale import tensor_function_scale

        if isinstance(other, TensorFunction):
            return tensor_function_multiply(other, self)
        return tensor_function_scale(self, other)

    def __truediv__(self, other) -> "TensorFunction":
        from ._tensor_function_divide import tensor_function_divide

        return tensor_function_divide(self, other)

    def __neg__(self) -> "TensorFunction":
        from ._tensor_function_negate import tensor_function_negate

        return tensor_function_negate(self)

    def __pow__(self, n: int) -> "TensorFunction":
        from ._tensor_function_pow import tensor_function_pow

        return tensor_function_pow(self, n)

    def __call__(self, *args):
        from ._tensor_function_evaluate import tensor_function_evaluate

        return tensor_function_evaluate(self, args)


def _coerce(value) -> TensorFunction:
    # Numbers and scalars become constant functions.
    if isinstance(value, TensorFunction):
        return value

    from ._tensor_function_constants import tensor_function_constant

    return tensor_function_constant(value)


def tensor_function(coeffs: Union[Tensor, float, complex]) -> TensorFunction:
    """Create a tensor function from a coefficient tensor.

    Parameters
    ----------
    coeffs : Tensor or number
        Coefficient tensor, axis ``m`` indexing powers of ``x_m``. Every
        axis must have at least one entry. Integer and boolean tensors are
        converted to ``float64``; the data is copied.

    Returns
    -------
    TensorFunction
        Tensor function instance.

    Raises
    ------
    TensorFunctionError
        If an axis has size 0 or the dtype is neither real nor complex
        floating point.

    Examples
    --------
    >>> f = tensor_function(torch.tensor([[0.0, 0.0], [0.0, 1.0]]))  # x*y
    >>> f(2.0, 3.0)
    Real(value=6.0)
    """
    if not isinstance(coeffs, Tensor):
        coeffs = torch.as_tensor(coeffs)

    if any(size == 0 for size in coeffs.shape):
        raise TensorFunctionError(
            f"Every axis needs at least one coefficient, "
            f"got shape {tuple(coeffs.shape)}"
        )

    coeffs = coeffs.detach().clone()
    if coeffs.is_complex():
        coeffs = coeffs.to(torch.complex128)
    else:
        coeffs = coeffs.to(torch.float64)

    return TensorFunction(coeffs=coeffs)
