import torch
from torch import Tensor


def integration_matrix(
    degree: int,
    order: int = 1,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """Power-basis integration matrix.

    Maps the coefficients ``a_0, ..., a_degree`` of a polynomial in one
    variable to the coefficients of its ``order``-fold antiderivative with
    all integration constants equal to zero.

    Parameters
    ----------
    degree : int
        Degree of the input polynomial.
    order : int
        Number of integrations.
    dtype : torch.dtype
        Matrix dtype.

    Returns
    -------
    Tensor
        Matrix, shape (degree + 1 + order, degree + 1).

    Notes
    -----
    Column ``i`` has a single non-zero entry at row ``i + order`` equal to
    ``1 / [(i + 1)(i + 2)...(i + order)]``.

    Examples
    --------
    >>> integration_matrix(1)
    tensor([[0.0000, 0.0000],
            [1.0000, 0.0000],
            [0.0000, 0.5000]], dtype=torch.float64)
    """
    rows = degree + 1 + order
    cols = degree + 1

    i = torch.arange(cols, dtype=dtype)
    factor = torch.ones(cols, dtype=dtype)
    for j in range(order):
        factor = factor * (i + j + 1)

    m = torch.zeros(rows, cols, dtype=dtype)
    index = torch.arange(cols)
    m[index + order, index] = 1.0 / factor

    return m
