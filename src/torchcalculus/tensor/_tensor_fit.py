from typing import Tuple

from torch import Tensor


def tensor_fit(a: Tensor, b: Tensor) -> Tuple[int, ...]:
    """Smallest dimension vector that holds both tensors.

    The rank is the larger of the two ranks; each dimension is the
    elementwise maximum, an axis missing from one tensor counting as 1.

    Examples
    --------
    >>> tensor_fit(torch.zeros(2, 1), torch.zeros(1, 3, 2))
    (2, 3, 2)
    """
    rank = max(a.dim(), b.dim())
    a_dims = list(a.shape) + [1] * (rank - a.dim())
    b_dims = list(b.shape) + [1] * (rank - b.dim())

    return tuple(max(p, q) for p, q in zip(a_dims, b_dims))
