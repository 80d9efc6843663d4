from typing import Sequence

from torch import Tensor

from torchcalculus.linear_algebra._resize_matrix import resize_matrix

from ._exceptions import InvalidShapeError
from ._tensor import _check_dims
from ._tensor_expand import tensor_expand
from ._tensor_mode_product import tensor_mode_product


def tensor_resize(t: Tensor, dims: Sequence[int]) -> Tensor:
    """Resize a tensor to a new dimension vector.

    Existing values keep their multi-index; new cells are zero and cells
    beyond a shrunk axis are dropped. When ``dims`` has more axes, size-1
    axes are appended first; then every axis whose size changes is
    transformed by one mode product with a resize matrix.

    Parameters
    ----------
    t : Tensor
        Input tensor.
    dims : sequence of int
        Target dimension vector, with at least as many axes as ``t``.

    Returns
    -------
    Tensor
        Tensor of shape ``dims``.

    Raises
    ------
    InvalidShapeError
        If ``dims`` has fewer axes than ``t`` or a dimension is below 1.
    """
    dims = _check_dims(dims)
    if tuple(t.shape) == dims:
        return t

    if len(dims) < t.dim():
        raise InvalidShapeError(
            f"Cannot resize a tensor of rank {t.dim()} to {list(dims)}"
        )

    if len(dims) > t.dim():
        t = tensor_expand(t, *([1] * (len(dims) - t.dim())))

    for mode, size in enumerate(dims):
        if t.shape[mode] == size:
            continue

        m = resize_matrix(t.shape[mode], size, dtype=t.dtype)
        t = tensor_mode_product(m, t, mode)

    return t
