"""Tests for truncated series of tensor functions."""

import math

import pytest
import torch

from torchcalculus.function import (
    DegreeError,
    DomainError,
    TruncatedSeriesWarning,
    UnsupportedOperationError,
    tensor_function,
    tensor_function_cos,
    tensor_function_equal,
    tensor_function_exp,
    tensor_function_is_zero,
    tensor_function_power,
    tensor_function_sin,
)



class TestTensorFunctionExp:
    """Tests for tensor_function_exp."""

    def test_coefficients(self, x):
        """The first terms of e^x are 1/n!."""
        torch.testing.assert_close(
            tensor_function_exp(x, 4).coeffs,
            torch.tensor([1.0, 1.0, 0.5, 1.0 / 6.0], dtype=torch.float64),
        )

    def test_value(self, x):
        """Enough terms approximate e^0.5."""
        r = tensor_function_exp(x, 20)(0.5)
        assert float(r) == pytest.approx(math.exp(0.5), abs=1e-12)

    def test_multivariate(self, x, y):
        """exp(x + y) at (0.1, 0.2)."""
        r = tensor_function_exp(x + y, 15)(0.1, 0.2)
        assert float(r) == pytest.approx(math.exp(0.3), abs=1e-12)

    def test_complex(self, x):
        """exp(i x) at 1 is cos(1) + i sin(1)."""
        f = tensor_function_exp(x * 1j, 25)
        r = complex(f(1.0))
        assert r.real == pytest.approx(math.cos(1.0), abs=1e-12)
        assert r.imag == pytest.approx(math.sin(1.0), abs=1e-12)

    def test_single_term_is_one(self, x):
        """One term is the constant 1."""
        assert tensor_function_equal(tensor_function_exp(x, 1), tensor_function(1.0))

    def test_no_terms_warns(self, x):
        """Zero terms give the zero function with a warning."""
        with pytest.warns(TruncatedSeriesWarning):
            r = tensor_function_exp(x, 0)
        assert tensor_function_is_zero(r)

    def test_negative_terms_raise(self, x):
        """The number of terms is non-negative."""
        with pytest.raises(DegreeError):
            tensor_function_exp(x, -1)


class TestTensorFunctionPower:
    """Tests for tensor_function_power."""

    def test_zero_exponent(self, x, y):
        """f^0 is the constant 1 with the arity of f."""
        r = tensor_function_power(x * y, 0, 5)
        assert r.coeffs.shape == (1, 1)

    def test_integer_exponent_is_exact(self, x):
        """Integer exponents use exact multiplication."""
        assert tensor_function_equal(
            tensor_function_power(x + 1, 3.0, 2), (x + 1) ** 3
        )

    def test_square_root(self, x):
        """sqrt(4.41) from a series about 4."""
        r = tensor_function_power(x, 0.5, 10, center=4.0)
        assert float(r(4.41)) == pytest.approx(2.1, abs=1e-8)

    def test_exact_at_center(self, x):
        """The truncated series is exact at the center."""
        r = tensor_function_power(x, 1.5, 6, center=4.0)
        assert float(r(4.0)) == pytest.approx(8.0, abs=1e-9)

    def test_single_term_is_constant(self, x):
        """One term is center^p."""
        r = tensor_function_power(x, 0.5, 1, center=9.0)
        assert float(r(100.0)) == pytest.approx(3.0)

    def test_composite_base(self, x, y):
        """(x + y)^(1/2) near (1, 1)."""
        r = tensor_function_power(x + y, 0.5, 12, center=2.0)
        assert float(r(1.1, 1.0)) == pytest.approx(math.sqrt(2.1), abs=1e-10)

    def test_negative_exponent_raises(self, x):
        """Negative exponents are unsupported."""
        with pytest.raises(UnsupportedOperationError):
            tensor_function_power(x, -0.5, 5)

    @pytest.mark.parametrize("center", [0.0, -1.0])
    def test_non_positive_center_raises(self, x, center):
        """Fractional powers need a positive center."""
        with pytest.raises(DomainError):
            tensor_function_power(x, 0.5, 5, center=center)


class TestTensorFunctionTrigonometric:
    """Tests for tensor_function_sin and tensor_function_cos."""

    def test_sin_coefficients(self, x):
        """sin x ~ x - x^3/6."""
        torch.testing.assert_close(
            tensor_function_sin(x, 2).coeffs,
            torch.tensor([0.0, 1.0, 0.0, -1.0 / 6.0], dtype=torch.float64),
        )

    def test_cos_coefficients(self, x):
        """cos x ~ 1 - x^2/2."""
        torch.testing.assert_close(
            tensor_function_cos(x, 2).coeffs,
            torch.tensor([1.0, 0.0, -0.5], dtype=torch.float64),
        )

    def test_values(self, x):
        """Enough terms approximate sin and cos."""
        s = tensor_function_sin(x, 12)(0.7)
        c = tensor_function_cos(x, 12)(0.7)
        assert float(s) == pytest.approx(math.sin(0.7), abs=1e-12)
        assert float(c) == pytest.approx(math.cos(0.7), abs=1e-12)

    def test_pythagorean_identity(self, x, y):
        """sin^2 + cos^2 = 1 at a point of a multivariate argument."""
        f = x * y
        s = tensor_function_sin(f, 10)
        c = tensor_function_cos(f, 10)
        r = (s * s + c * c)(0.6, 0.9)
        assert float(r) == pytest.approx(1.0, abs=1e-12)

    def test_no_terms_warns(self, x):
        """Zero terms give the zero function with a warning."""
        with pytest.warns(TruncatedSeriesWarning):
            assert tensor_function_is_zero(tensor_function_sin(x, 0))
        with pytest.warns(TruncatedSeriesWarning):
            assert tensor_function_is_zero(tensor_function_cos(x, 0))
