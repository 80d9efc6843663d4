from torch import Tensor

from ._exceptions import InvalidShapeError
from ._tensor import _promote


def tensor_inner_product(a: Tensor, b: Tensor) -> Tensor:
    """Sum of the elementwise products of two equal-shaped tensors.

    Returns
    -------
    Tensor
        0-d tensor.

    Raises
    ------
    InvalidShapeError
        If the shapes differ.
    """
    if a.shape != b.shape:
        raise InvalidShapeError(
            f"Cannot take the inner product of shapes {tuple(a.shape)} "
            f"and {tuple(b.shape)}"
        )

    a, b = _promote(a, b)

    return (a * b).sum()
