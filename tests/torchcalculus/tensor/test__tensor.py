"""Tests for coefficient tensor construction and the storage convention."""

import pytest
import torch

from torchcalculus.scalar import Complex
from torchcalculus.tensor import (
    InvalidShapeError,
    TensorError,
    multi_indices,
    tensor,
    tensor_flat_index,
    tensor_from_derivatives,
    tensor_values,
)


class TestTensorConstructor:
    """Tests for tensor() construction."""

    def test_dimension_zero_varies_fastest(self):
        """Flat position i0 + i1*d0 maps to t[i0, i1]."""
        t = tensor([2, 3], [1, 2, 3, 4, 5, 6])
        assert t.shape == (2, 3)
        torch.testing.assert_close(
            t,
            torch.tensor([[1.0, 3.0, 5.0], [2.0, 4.0, 6.0]], dtype=torch.float64),
        )

    def test_three_dimensions(self):
        """Multi-index (1, 0, 1) of dims [2, 2, 2] sits at position 5."""
        t = tensor([2, 2, 2], range(8))
        assert t[1, 0, 1] == 5.0
        assert t[0, 1, 1] == 6.0

    def test_zeros_when_values_omitted(self):
        """Omitted values give a zero tensor."""
        t = tensor([2, 2])
        assert t.dtype == torch.float64
        assert not t.any()

    def test_empty_dims(self):
        """An empty dimension vector holds one value."""
        t = tensor([], [7.0])
        assert t.dim() == 0
        assert t.item() == 7.0

    def test_complex_values(self):
        """Complex values select complex128."""
        t = tensor([2], [1.0, Complex(0.0, 1.0)])
        assert t.dtype == torch.complex128
        assert t[1].item() == 1j

    def test_string_values(self):
        """Values may be number strings."""
        t = tensor([2], ["1", "2i"])
        assert t[1].item() == 2j

    def test_copies_input_tensor(self):
        """A tensor input is copied."""
        values = torch.tensor([1.0, 2.0], dtype=torch.float64)
        t = tensor([2], values)
        values[0] = 5.0
        assert t[0] == 1.0

    def test_wrong_length_raises(self):
        """The number of values must equal the product of dims."""
        with pytest.raises(InvalidShapeError):
            tensor([2, 2], [1.0, 2.0, 3.0])

    def test_zero_dimension_raises(self):
        """Every dimension must be at least 1."""
        with pytest.raises(InvalidShapeError):
            tensor([2, 0])

    def test_complex_into_real_dtype_raises(self):
        """Complex values cannot be stored as float64."""
        with pytest.raises(InvalidShapeError):
            tensor([1], [1j], dtype=torch.float64)

    def test_invalid_shape_error_is_tensor_error(self):
        """InvalidShapeError derives from TensorError."""
        with pytest.raises(TensorError):
            tensor([3], [1.0])


class TestTensorValues:
    """Tests for flattening in storage order."""

    def test_inverse_of_constructor(self):
        """tensor_values undoes tensor()."""
        values = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        torch.testing.assert_close(
            tensor_values(tensor([3, 2], values)),
            torch.tensor(values, dtype=torch.float64),
        )

    def test_flat_index(self):
        """tensor_flat_index agrees with the constructor."""
        dims = [2, 3, 2]
        t = tensor(dims, range(12))
        for index in multi_indices(dims):
            assert t[index] == tensor_flat_index(index, dims)


class TestMultiIndices:
    """Tests for odometer iteration."""

    def test_order(self):
        """Dimension 0 turns fastest."""
        assert list(multi_indices([2, 3])) == [
            (0, 0),
            (1, 0),
            (0, 1),
            (1, 1),
            (0, 2),
            (1, 2),
        ]

    def test_empty_dims(self):
        """An empty dimension vector yields the empty index once."""
        assert list(multi_indices([])) == [()]

    def test_skip(self):
        """A skipped axis stays at 0."""
        assert list(multi_indices([2, 2], skip=0)) == [(0, 0), (0, 1)]

    def test_count(self):
        """Every multi-index is produced exactly once."""
        indices = list(multi_indices([2, 3, 4]))
        assert len(indices) == 24
        assert len(set(indices)) == 24


class TestTensorFromDerivatives:
    """Tests for factorial normalization."""

    def test_exponential(self):
        """Derivatives of e^x at 0 give 1/n!."""
        torch.testing.assert_close(
            tensor_from_derivatives([4], [1, 1, 1, 1]),
            torch.tensor([1.0, 1.0, 0.5, 1.0 / 6.0], dtype=torch.float64),
        )

    def test_mixed_partials(self):
        """Entry (i, j) is divided by i! * j!."""
        t = tensor_from_derivatives([3, 3], [1.0] * 9)
        assert t[2, 2] == 0.25
        assert t[1, 2] == 0.5

    def test_complex(self):
        """Complex derivatives keep the complex dtype."""
        t = tensor_from_derivatives([3], [0, 0, 2j])
        assert t.dtype == torch.complex128
        assert t[2].item() == 1j
