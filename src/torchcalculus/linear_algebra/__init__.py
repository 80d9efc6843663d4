"""Matrices, vectors and the transform matrices of the tensor engine."""

from ._differentiation_matrix import differentiation_matrix
from ._integration_matrix import integration_matrix
from ._matrix import (
    matrix,
    matrix_add,
    matrix_multiply,
    matrix_subtract,
    matrix_transpose,
)
from ._resize_matrix import resize_matrix
from ._vector import matrix_vector_multiply, vector, vector_dot

__all__ = [
    "differentiation_matrix",
    "integration_matrix",
    "matrix",
    "matrix_add",
    "matrix_multiply",
    "matrix_subtract",
    "matrix_transpose",
    "matrix_vector_multiply",
    "resize_matrix",
    "vector",
    "vector_dot",
]
