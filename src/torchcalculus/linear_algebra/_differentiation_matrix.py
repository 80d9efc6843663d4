import torch
from torch import Tensor


def differentiation_matrix(
    degree: int,
    order: int = 1,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """Power-basis differentiation matrix.

    Maps the coefficients ``a_0, ..., a_degree`` of a polynomial in one
    variable to the coefficients of its ``order``-th derivative.

    Parameters
    ----------
    degree : int
        Degree of the input polynomial.
    order : int
        Derivative order, ``0 <= order <= degree``.
    dtype : torch.dtype
        Matrix dtype.

    Returns
    -------
    Tensor
        Matrix, shape (degree + 1 - order, degree + 1).

    Notes
    -----
    Row ``i`` has a single non-zero entry at column ``i + order`` equal to
    the falling factorial ``(i + 1)(i + 2)...(i + order)``, the factor that
    ``d^order/dx^order`` produces on ``x^(i + order)``.

    Examples
    --------
    >>> differentiation_matrix(2)
    tensor([[0., 1., 0.],
            [0., 0., 2.]], dtype=torch.float64)
    """
    rows = degree + 1 - order
    cols = degree + 1

    i = torch.arange(rows, dtype=dtype)
    factor = torch.ones(rows, dtype=dtype)
    for j in range(order):
        factor = factor * (i + j + 1)

    m = torch.zeros(rows, cols, dtype=dtype)
    index = torch.arange(rows)
    m[index, index + order] = factor

    return m
