"""torchcalculus: multivariate polynomial calculus on PyTorch tensors."""

from . import (
    function,
    linear_algebra,
    scalar,
    tensor,
)

__all__ = [
    "function",
    "linear_algebra",
    "scalar",
    "tensor",
]

__version__ = "0.1.0"
