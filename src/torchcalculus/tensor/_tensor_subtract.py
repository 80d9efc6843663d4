from torch import Tensor

from ._tensor import _promote
from ._tensor_fit import tensor_fit
from ._tensor_resize import tensor_resize


def tensor_subtract(a: Tensor, b: Tensor) -> Tensor:
    """Subtract two tensors, resizing both to the dimensions that fit them."""
    dims = tensor_fit(a, b)
    a, b = _promote(tensor_resize(a, dims), tensor_resize(b, dims))

    return a - b
