import math

from ._exceptions import DomainError, UnsupportedOperationError
from ._series import _check_terms
from ._tensor_function import TensorFunction
from ._tensor_function_add import tensor_function_add
from ._tensor_function_constants import tensor_function_one, tensor_function_zero
from ._tensor_function_multiply import tensor_function_multiply
from ._tensor_function_pow import tensor_function_pow
from ._tensor_function_scale import tensor_function_scale


def tensor_function_power(
    f: TensorFunction,
    p: float,
    terms: int,
    center: float = 1.0,
) -> TensorFunction:
    """Truncated binomial series of ``f^p`` for a real exponent.

    ``x^p`` is expanded about ``center`` as
    ``sum_j C(p, j) center^(p-j) (x - center)^j`` for ``j < terms``, the
    powers of ``x - center`` are multiplied out, and ``f`` is substituted
    for ``x``. The approximation is good where ``f`` stays close to
    ``center``.

    Parameters
    ----------
    f : TensorFunction
        Base.
    p : float
        Non-negative exponent.
    terms : int
        Number of series terms. Ignored for integer ``p``.
    center : float, optional
        Expansion point, positive for fractional ``p``. Default is 1.

    Returns
    -------
    TensorFunction
        The constant 1 for ``p == 0``, the exact power for integer ``p``
        and the truncated series otherwise.

    Raises
    ------
    UnsupportedOperationError
        If ``p`` is negative.
    DomainError
        If ``p`` is fractional and ``center <= 0``.

    Examples
    --------
    >>> x = tensor_function_variable(0)
    >>> r = tensor_function_power(x, 0.5, 8, center=4.0)
    >>> round(float(r(4.41)), 6)
    2.1
    """
    p = float(p)

    if p < 0:
        raise UnsupportedOperationError(
            f"Exponent must be non-negative, got {p}"
        )

    if p == 0:
        return tensor_function_one(f.coeffs.dim(), dtype=f.coeffs.dtype)

    if p.is_integer():
        return tensor_function_pow(f, int(p))

    if center <= 0:
        raise DomainError(
            f"Fractional powers need a positive center, got {center}"
        )

    _check_terms(terms, "binomial")

    result = tensor_function_zero(f.coeffs.dtype)
    power = tensor_function_one(dtype=f.coeffs.dtype)

    # center^(p-n) / n! and p (p-1) ... (p-n+1)
    scale = math.pow(center, p)
    falling = 1.0

    for n in range(terms):
        # sum_k (-1)^k C(p-n, k) over the remaining terms
        inner = 0.0
        coefficient = falling
        for k in range(terms - n):
            inner += coefficient
            coefficient *= -(p - n - k) / (k + 1)

        result = tensor_function_add(
            result, tensor_function_scale(power, inner * scale)
        )

        if n + 1 < terms:
            power = tensor_function_multiply(power, f)
        scale /= center * (n + 1)
        falling *= p - n

    return result
