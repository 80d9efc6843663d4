import torch
from torch import Tensor

from ._exceptions import InvalidShapeError
from ._tensor import _promote


def tensor_mode_product(matrix: Tensor, t: Tensor, mode: int) -> Tensor:
    """Mode product of a matrix and a tensor.

    Every one-dimensional strand of ``t`` along axis ``mode`` (all other
    indices held fixed) is replaced by ``matrix @ strand``. This single
    primitive implements resizing, differentiation and integration.

    Parameters
    ----------
    matrix : Tensor
        Transform matrix, shape (L, K).
    t : Tensor
        Tensor whose axis ``mode`` has size K.
    mode : int
        Axis to transform.

    Returns
    -------
    Tensor
        Tensor equal to ``t`` in shape except axis ``mode``, which has
        size L.

    Raises
    ------
    InvalidShapeError
        If ``mode`` is not an axis of ``t`` or K differs from the size of
        that axis.

    Examples
    --------
    >>> m = torch.tensor([[0.0, 1.0, 0.0], [0.0, 0.0, 2.0]])
    >>> tensor_mode_product(m, torch.tensor([1.0, 2.0, 3.0]), 0)
    tensor([2., 6.])
    """
    if mode < 0 or mode >= t.dim():
        raise InvalidShapeError(
            f"Mode {mode} is out of range for a tensor of rank {t.dim()}"
        )

    if matrix.dim() != 2 or matrix.shape[1] != t.shape[mode]:
        raise InvalidShapeError(
            f"Cannot apply a matrix of shape {tuple(matrix.shape)} along "
            f"an axis of size {t.shape[mode]}"
        )

    matrix, t = _promote(matrix, t)

    result = torch.tensordot(matrix, t, dims=([1], [mode]))

    return torch.movedim(result, 0, mode).contiguous()
