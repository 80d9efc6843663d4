from torchcalculus.tensor import tensor_fit, tensor_resize
from torchcalculus.tensor._tensor import _promote

from ._tensor_function import TensorFunction


def tensor_function_equal(
    f: TensorFunction,
    g: TensorFunction,
    tol: float = 1e-8,
) -> bool:
    """Check tensor function equality within tolerance.

    Both coefficient tensors are resized to their common shape, so
    trailing zero coefficients and extra size-1 axes do not matter.

    Parameters
    ----------
    f, g : TensorFunction
        Functions to compare.
    tol : float
        Absolute tolerance for coefficient comparison.

    Returns
    -------
    bool
        True if every coefficient differs by at most ``tol``.

    Examples
    --------
    >>> f = tensor_function(torch.tensor([1.0, 2.0]))
    >>> g = tensor_function(torch.tensor([[1.0], [2.0], [0.0]]))
    >>> tensor_function_equal(f, g)
    True
    """
    dims = tensor_fit(f.coeffs, g.coeffs)
    a, b = _promote(tensor_resize(f.coeffs, dims), tensor_resize(g.coeffs, dims))

    return bool(((a - b).abs() <= tol).all())
