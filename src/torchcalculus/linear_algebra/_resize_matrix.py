import torch
from torch import Tensor


def resize_matrix(
    old_size: int,
    new_size: int,
    before: int = 0,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """Matrix that embeds a vector into a vector of another length.

    Applied to a vector of length ``old_size``, the result has length
    ``new_size`` with ``before`` zeros, then the copied entries, then zeros.
    Entries that do not fit are dropped.

    Parameters
    ----------
    old_size : int
        Length of the input vector.
    new_size : int
        Length of the output vector.
    before : int
        Number of zeros placed before the first copied entry.
    dtype : torch.dtype
        Matrix dtype.

    Returns
    -------
    Tensor
        Matrix, shape (new_size, old_size).

    Examples
    --------
    >>> resize_matrix(2, 3)
    tensor([[1., 0.],
            [0., 1.],
            [0., 0.]], dtype=torch.float64)
    """
    m = torch.zeros(new_size, old_size, dtype=dtype)

    n = max(min(old_size, new_size - before), 0)
    index = torch.arange(n)
    m[index + before, index] = 1.0

    return m
