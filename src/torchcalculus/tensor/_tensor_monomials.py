from typing import Sequence

import torch
from torch import Tensor

from torchcalculus.scalar import scalar_to_tensor

from ._exceptions import InvalidShapeError
from ._tensor import _outer_product


def tensor_monomials(args: Sequence, dims: Sequence[int]) -> Tensor:
    """Tensor of monomials evaluated at a point.

    Entry ``(i_0, ..., i_{k-1})`` is ``x_0^i_0 * ... * x_{k-1}^i_{k-1}``,
    so the inner product with a coefficient tensor of shape ``dims``
    evaluates the polynomial at ``x``.

    Parameters
    ----------
    args : sequence of scalars or numbers
        Point ``x``, one value per axis of ``dims``.
    dims : sequence of int
        Dimension vector.

    Returns
    -------
    Tensor
        Tensor of shape ``dims``; complex when any argument is complex.
    """
    if len(args) != len(dims):
        raise InvalidShapeError(
            f"Expected {len(dims)} arguments, got {len(args)}"
        )

    xs = [scalar_to_tensor(x) for x in args]

    dtype = torch.float64
    for x in xs:
        dtype = torch.promote_types(dtype, x.dtype)

    powers = []
    for x, size in zip(xs, dims):
        x = x.to(dtype)
        column = [torch.ones((), dtype=dtype)]
        for _ in range(size - 1):
            column.append(column[-1] * x)
        powers.append(torch.stack(column))

    return _outer_product(powers, dtype)
