"""Dense coefficient tensors: storage convention, resizing, mode products
and convolution."""

from ._exceptions import InvalidShapeError, TensorError
from ._multi_indices import multi_indices, tensor_flat_index
from ._tensor import tensor, tensor_from_derivatives, tensor_values
from ._tensor_add import tensor_add
from ._tensor_condense import tensor_condense
from ._tensor_divide import tensor_divide
from ._tensor_expand import tensor_expand
from ._tensor_fit import tensor_fit
from ._tensor_inner_product import tensor_inner_product
from ._tensor_mode_product import tensor_mode_product
from ._tensor_monomials import tensor_monomials
from ._tensor_multiply import tensor_multiply
from ._tensor_resize import tensor_resize
from ._tensor_scale import tensor_scale
from ._tensor_subtract import tensor_subtract

__all__ = [
    "InvalidShapeError",
    "TensorError",
    "multi_indices",
    "tensor",
    "tensor_add",
    "tensor_condense",
    "tensor_divide",
    "tensor_expand",
    "tensor_fit",
    "tensor_flat_index",
    "tensor_from_derivatives",
    "tensor_inner_product",
    "tensor_mode_product",
    "tensor_monomials",
    "tensor_multiply",
    "tensor_resize",
    "tensor_scale",
    "tensor_subtract",
    "tensor_values",
]
