import torch
from torch import Tensor

from ._multi_indices import multi_indices
from ._tensor import _promote, _with_rank


def tensor_multiply(a: Tensor, b: Tensor) -> Tensor:
    """Multiply two tensors by full polynomial convolution.

    The entry at multi-index ``i + j`` of the result accumulates
    ``a[i] * b[j]`` over every valid pair ``(i, j)``; this is the product
    of the two polynomials whose coefficients the tensors hold, not an
    elementwise product.

    Parameters
    ----------
    a, b : Tensor
        Tensors with dimension vectors ``p`` and ``q``.

    Returns
    -------
    Tensor
        Tensor with dimensions ``p_i + q_i - 1``, an axis missing from one
        operand counting as 1.

    Examples
    --------
    >>> tensor_multiply(torch.tensor([1.0, 2.0]), torch.tensor([3.0, 4.0]))
    tensor([ 3., 10.,  8.])
    """
    rank = max(a.dim(), b.dim())
    a, b = _promote(_with_rank(a, rank), _with_rank(b, rank))

    dims = [p + q - 1 for p, q in zip(a.shape, b.shape)]
    result = torch.zeros(dims, dtype=a.dtype, device=a.device)

    for index in multi_indices(a.shape):
        coeff = a[index]
        if coeff == 0:
            continue

        # b shifted by index
        region = tuple(slice(i, i + n) for i, n in zip(index, b.shape))
        result[region] += coeff * b

    return result
