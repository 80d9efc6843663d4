from torch import Tensor

from torchcalculus.scalar import DivisionByZeroError, scalar, scalar_to_tensor


def tensor_divide(t: Tensor, c) -> Tensor:
    """Divide every entry of a tensor by a scalar.

    Raises
    ------
    DivisionByZeroError
        If the magnitude of ``c`` is exactly zero.
    """
    c = scalar(c)
    if abs(c) == 0.0:
        raise DivisionByZeroError("Cannot divide a tensor by zero")

    return t / scalar_to_tensor(c, t.dtype)
