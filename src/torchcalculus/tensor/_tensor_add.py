from torch import Tensor

from ._tensor import _promote
from ._tensor_fit import tensor_fit
from ._tensor_resize import tensor_resize


def tensor_add(a: Tensor, b: Tensor) -> Tensor:
    """Add two tensors, resizing both to the dimensions that fit them.

    Examples
    --------
    >>> tensor_add(torch.tensor([1.0, 2.0]), torch.tensor([[1.0, 1.0, 1.0]]))
    tensor([[2., 1., 1.],
            [2., 0., 0.]])
    """
    dims = tensor_fit(a, b)
    a, b = _promote(tensor_resize(a, dims), tensor_resize(b, dims))

    return a + b
