from ._series import _check_terms
from ._tensor_function import TensorFunction
from ._tensor_function_add import tensor_function_add
from ._tensor_function_constants import tensor_function_one, tensor_function_zero
from ._tensor_function_divide import tensor_function_divide
from ._tensor_function_multiply import tensor_function_multiply


def tensor_function_exp(f: TensorFunction, terms: int) -> TensorFunction:
    """Truncated exponential series of a tensor function.

    Parameters
    ----------
    f : TensorFunction
        Exponent.
    terms : int
        Number of terms ``f^i / i!`` summed, ``i = 0, ..., terms - 1``.

    Returns
    -------
    TensorFunction
        Polynomial approximation of ``exp(f)``.

    Raises
    ------
    DegreeError
        If ``terms`` is negative.

    Warns
    -----
    TruncatedSeriesWarning
        If ``terms`` is 0.

    Examples
    --------
    >>> x = tensor_function_variable(0)
    >>> tensor_function_exp(x, 4).coeffs
    tensor([1.0000, 1.0000, 0.5000, 0.1667], dtype=torch.float64)
    """
    _check_terms(terms, "exponential")

    result = tensor_function_zero(f.coeffs.dtype)
    power = tensor_function_one(dtype=f.coeffs.dtype)

    for i in range(terms):
        result = tensor_function_add(result, power)
        if i + 1 < terms:
            power = tensor_function_multiply(
                power, tensor_function_divide(f, i + 1)
            )

    return result
