from ._series import _check_terms
from ._tensor_function import TensorFunction
from ._tensor_function_add import tensor_function_add
from ._tensor_function_constants import tensor_function_zero
from ._tensor_function_multiply import tensor_function_multiply
from ._tensor_function_scale import tensor_function_scale


def tensor_function_sin(f: TensorFunction, terms: int) -> TensorFunction:
    """Truncated Taylor series of ``sin(f)``.

    Sums ``(-1)^k f^(2k+1) / (2k+1)!`` for ``k = 0, ..., terms - 1``.

    Examples
    --------
    >>> x = tensor_function_variable(0)
    >>> tensor_function_sin(x, 2).coeffs
    tensor([ 0.0000,  1.0000,  0.0000, -0.1667], dtype=torch.float64)
    """
    _check_terms(terms, "sine")

    result = tensor_function_zero(f.coeffs.dtype)
    square = tensor_function_multiply(f, f)
    term = f

    for k in range(terms):
        result = tensor_function_add(result, term)
        if k + 1 < terms:
            term = tensor_function_scale(
                tensor_function_multiply(term, square),
                -1.0 / ((2 * k + 2) * (2 * k + 3)),
            )

    return result
