from torch import Tensor

from torchcalculus.scalar import scalar_to_tensor


def tensor_scale(t: Tensor, c) -> Tensor:
    """Multiply every entry of a tensor by a scalar.

    Parameters
    ----------
    t : Tensor
        Input tensor.
    c : Scalar or number
        Factor. A complex factor promotes a real tensor to complex.

    Returns
    -------
    Tensor
        Scaled tensor ``c * t``.
    """
    return t * scalar_to_tensor(c, t.dtype)
