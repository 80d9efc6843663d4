from ._series import _check_terms
from ._tensor_function import TensorFunction
from ._tensor_function_add import tensor_function_add
from ._tensor_function_constants import tensor_function_one, tensor_function_zero
from ._tensor_function_multiply import tensor_function_multiply
from ._tensor_function_scale import tensor_function_scale


def tensor_function_cos(f: TensorFunction, terms: int) -> TensorFunction:
    """Truncated Taylor series of ``cos(f)``.

    Sums ``(-1)^k f^(2k) / (2k)!`` for ``k = 0, ..., terms - 1``.
    """
    _check_terms(terms, "cosine")

    result = tensor_function_zero(f.coeffs.dtype)
    square = tensor_function_multiply(f, f)
    term = tensor_function_one(dtype=f.coeffs.dtype)

    for k in range(terms):
        result = tensor_function_add(result, term)
        if k + 1 < terms:
            term = tensor_function_scale(
                tensor_function_multiply(term, square),
                -1.0 / ((2 * k + 1) * (2 * k + 2)),
            )

    return result
