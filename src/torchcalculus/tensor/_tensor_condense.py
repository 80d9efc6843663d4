from typing import Tuple

import torch
from torch import Tensor


def tensor_condense(t: Tensor) -> Tuple[int, ...]:
    """Smallest dimensions that hold every non-zero entry of a tensor.

    Each dimension is at least 1; the rank is unchanged.

    Examples
    --------
    >>> tensor_condense(torch.tensor([[1.0, 0.0], [0.0, 0.0]]))
    (1, 1)
    """
    nonzero = torch.nonzero(t)
    if nonzero.shape[0] == 0:
        return (1,) * t.dim()

    return tuple(int(i) + 1 for i in nonzero.max(dim=0).values)
