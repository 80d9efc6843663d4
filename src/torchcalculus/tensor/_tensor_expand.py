import torch
from torch import Tensor

from ._exceptions import InvalidShapeError


def tensor_expand(t: Tensor, *next_dims: int) -> Tensor:
    """Append axes to a tensor.

    The existing data sits at index 0 of every new axis; all other cells
    are zero.

    Parameters
    ----------
    t : Tensor
        Input tensor, shape (d_0, ..., d_{k-1}).
    *next_dims : int
        Sizes of the appended axes, each at least 1.

    Returns
    -------
    Tensor
        Tensor of shape (d_0, ..., d_{k-1}, *next_dims).
    """
    if any(d < 1 for d in next_dims):
        raise InvalidShapeError(
            f"Dimensions must be at least 1, got {list(next_dims)}"
        )

    result = torch.zeros(*t.shape, *next_dims, dtype=t.dtype, device=t.device)
    result[(Ellipsis,) + (0,) * len(next_dims)] = t

    return result
