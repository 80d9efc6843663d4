from typing import Sequence

from torchcalculus.scalar import Scalar, scalar_from_tensor
from torchcalculus.tensor import tensor_inner_product, tensor_monomials

from ._exceptions import DomainError
from ._tensor_function import TensorFunction


def tensor_function_evaluate(f: TensorFunction, args: Sequence) -> Scalar:
    """Evaluate a tensor function at a point.

    The value is the inner product of the coefficient tensor with the
    tensor of monomials ``x_0^i_0 * ... * x_{k-1}^i_{k-1}``.

    Parameters
    ----------
    f : TensorFunction
        Function to evaluate.
    args : sequence of Scalar, number or str
        One value per variable. Trailing values beyond the arity are
        ignored.

    Returns
    -------
    Scalar
        ``Complex`` if the coefficients or any argument are complex,
        ``Real`` otherwise.

    Raises
    ------
    DomainError
        If fewer values than the arity are given.

    Examples
    --------
    >>> f = tensor_function_from_coefficients([2, 2], [1, 0, 0, 1])  # 1 + xy
    >>> tensor_function_evaluate(f, [2.0, 3.0])
    Real(value=7.0)
    """
    args = list(args)
    arity = f.coeffs.dim()

    if len(args) < arity:
        raise DomainError(
            f"Function of {arity} variables evaluated at {len(args)} values"
        )

    monomials = tensor_monomials(args[:arity], f.coeffs.shape)

    return scalar_from_tensor(tensor_inner_product(f.coeffs, monomials))
