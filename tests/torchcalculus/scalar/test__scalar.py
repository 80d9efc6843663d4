"""Tests for real and complex scalars."""

import math

import hypothesis
import pytest
import torch

from torchcalculus.scalar import (
    Complex,
    DivisionByZeroError,
    Real,
    ScalarError,
    is_complex,
    scalar,
    scalar_abs,
    scalar_add,
    scalar_conjugate,
    scalar_divide,
    scalar_equal,
    scalar_from_tensor,
    scalar_imag,
    scalar_multiply,
    scalar_negate,
    scalar_real,
    scalar_subtract,
    scalar_to_tensor,
)
from torchcalculus.testing.strategies import (
    complex_numbers,
    integers_as_floats,
    real_numbers,
)


class TestScalarConstructor:
    """Tests for scalar() conversion."""

    def test_int(self):
        """Integers become Real."""
        assert scalar(3) == Real(3.0)
        assert isinstance(scalar(3), Real)

    def test_complex_with_zero_imaginary_part(self):
        """Python complex without imaginary part becomes Real."""
        assert isinstance(scalar(2 + 0j), Real)

    def test_complex(self):
        """Python complex becomes Complex."""
        s = scalar(1 + 2j)
        assert isinstance(s, Complex)
        assert (s.re, s.im) == (1.0, 2.0)

    def test_passthrough(self):
        """Scalars are returned unchanged."""
        c = Complex(1.0, 1.0)
        assert scalar(c) is c

    def test_tensor(self):
        """0-d tensors are converted by dtype."""
        assert isinstance(scalar(torch.tensor(2.0)), Real)
        assert isinstance(scalar(torch.tensor(2.0 + 0j)), Complex)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3", Real(3.0)),
            ("-2.5", Real(-2.5)),
            ("1+2i", Complex(1.0, 2.0)),
            ("-i", Complex(0.0, -1.0)),
            ("i", Complex(0.0, 1.0)),
            ("1.5 - 2i", Complex(1.5, -2.0)),
            ("--4", Real(4.0)),
            ("2i - 2i + 1", Real(1.0)),
        ],
    )
    def test_string(self, text, expected):
        """Number strings follow the a+bi grammar."""
        s = scalar(text)
        assert s == expected
        assert is_complex(s) == is_complex(expected)

    @pytest.mark.parametrize(
        "text", ["", "abc", "1+", ".", "2x", "1.2.3", "1..5", "..i"]
    )
    def test_invalid_string_raises(self, text):
        """Malformed strings raise ScalarError."""
        with pytest.raises(ScalarError):
            scalar(text)

    def test_bool_raises(self):
        """Booleans are rejected."""
        with pytest.raises(ScalarError):
            scalar(True)

    def test_object_raises(self):
        """Arbitrary objects are rejected."""
        with pytest.raises(ScalarError):
            scalar(object())


class TestScalarArithmetic:
    """Tests for scalar arithmetic."""

    def test_add_real(self):
        """Real + Real stays Real."""
        r = scalar_add(Real(1.0), Real(2.0))
        assert isinstance(r, Real)
        assert r == Real(3.0)

    def test_add_promotes(self):
        """Real + Complex promotes to Complex."""
        r = scalar_add(Real(1.0), Complex(1.0, 2.0))
        assert isinstance(r, Complex)
        assert r == Complex(2.0, 2.0)

    def test_subtract(self):
        """Subtraction of complex scalars."""
        assert scalar_subtract(Complex(3.0, 1.0), Real(1.0)) == Complex(2.0, 1.0)

    def test_multiply_real(self):
        """Real * Real stays Real."""
        r = scalar_multiply(Real(3.0), Real(-2.0))
        assert isinstance(r, Real)
        assert r == Real(-6.0)

    def test_multiply_complex(self):
        """(1 + 2i)(3 - i) = 5 + 5i."""
        assert scalar_multiply(Complex(1.0, 2.0), Complex(3.0, -1.0)) == Complex(
            5.0, 5.0
        )

    def test_divide_complex(self):
        """(5 + 5i) / (1 + 2i) = 3 - i."""
        r = scalar_divide(Complex(5.0, 5.0), Complex(1.0, 2.0))
        assert scalar_equal(r, Complex(3.0, -1.0), tol=1e-12)

    def test_divide_by_raw_float(self):
        """The divisor may be a plain float."""
        assert scalar_divide(Real(3.0), 2.0) == Real(1.5)

    def test_self_division_is_one(self):
        """A non-zero complex number divided by itself is 1 + 0i."""
        c = Complex(3.0, 4.0)
        r = scalar_divide(c, c)
        assert isinstance(r, Complex)
        assert scalar_equal(r, Complex(1.0, 0.0), tol=1e-15)

    @pytest.mark.parametrize("zero", [Real(0.0), Complex(0.0, 0.0), 0.0])
    def test_divide_by_zero_raises(self, zero):
        """Division by exactly zero raises DivisionByZeroError."""
        with pytest.raises(DivisionByZeroError):
            scalar_divide(Complex(1.0, 1.0), zero)

    def test_divide_by_zero_is_zero_division_error(self):
        """DivisionByZeroError can be caught as ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            Real(1.0) / 0

    def test_negate(self):
        """Negation flips both parts."""
        assert scalar_negate(Complex(1.0, -2.0)) == Complex(-1.0, 2.0)
        assert scalar_negate(Real(1.0)) == Real(-1.0)

    def test_operators(self):
        """Operators delegate to the scalar functions."""
        a = Complex(1.0, 2.0)
        assert a + 1 == Complex(2.0, 2.0)
        assert 1 - a == Complex(0.0, -2.0)
        assert 2 * a == Complex(2.0, 4.0)
        assert -a == Complex(-1.0, -2.0)
        assert Real(6.0) / Real(3.0) == Real(2.0)
        assert 6 / Real(3.0) == Real(2.0)

    @hypothesis.given(complex_numbers(), complex_numbers())
    def test_add_commutes(self, a, b):
        """a + b == b + a."""
        assert scalar(a) + scalar(b) == scalar(b) + scalar(a)

    @hypothesis.given(integers_as_floats(), integers_as_floats(), integers_as_floats())
    def test_multiply_associates(self, a, b, c):
        """(ab)c == a(bc) for exactly representable values."""
        x, y, z = Complex(a, b), Complex(b, c), Real(c)
        assert (x * y) * z == x * (y * z)

    @hypothesis.given(real_numbers(-1e300, 1e300, allow_zero=False))
    def test_real_self_division(self, a):
        """a / a is exactly one for any finite non-zero real."""
        assert Real(a) / Real(a) == Real(1.0)

    @hypothesis.given(
        real_numbers(-1e300, 1e300, allow_zero=False),
        real_numbers(-1e300, 1e300),
    )
    def test_complex_self_division(self, re, im):
        """z / z is one for any non-zero complex z."""
        z = Complex(re, im)
        assert scalar_equal(z / z, Real(1.0), tol=1e-12)

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Real(1e200), Real(1e200), 1.0),
            (Real(1.0), Real(1e-170), 1.0 / 1e-170),
            (Real(3.0), Real(1e-160), 3.0 / 1e-160),
            (Real(-1e-300), Real(1e-300), -1.0),
        ],
    )
    def test_real_divide_extreme_magnitudes(self, a, b, expected):
        """Real division neither overflows nor underflows intermediates."""
        assert scalar_divide(a, b) == Real(expected)

    @pytest.mark.parametrize(
        "z",
        [Complex(1e-170, 1e-170), Complex(1e200, -1e200), Complex(0.0, 1e-300)],
    )
    def test_complex_divide_extreme_magnitudes(self, z):
        """Tiny and huge complex divisors are not mistaken for zero."""
        assert scalar_divide(z, z) == Real(1.0)


class TestScalarProperties:
    """Tests for scalar accessors and comparison."""

    def test_abs(self):
        """Magnitude of 3 + 4i is 5."""
        assert scalar_abs(Complex(3.0, 4.0)) == 5.0
        assert abs(Real(-2.0)) == 2.0

    def test_real_and_imag(self):
        """Parts are returned as Real."""
        c = Complex(1.0, -2.0)
        assert scalar_real(c) == Real(1.0)
        assert scalar_imag(c) == Real(-2.0)
        assert scalar_imag(Real(5.0)) == Real(0.0)

    def test_conjugate(self):
        """Conjugation negates the imaginary part."""
        assert scalar_conjugate(Complex(1.0, 2.0)) == Complex(1.0, -2.0)
        assert scalar_conjugate(Real(1.0)) == Real(1.0)

    def test_real_equals_complex_with_zero_imaginary_part(self):
        """Equality is structural on (re, im)."""
        assert Real(2.0) == Complex(2.0, 0.0)
        assert Complex(2.0, 0.0) == Real(2.0)
        assert Real(2.0) != Complex(2.0, 1e-300)

    def test_hash_consistent_with_equality(self):
        """Equal scalars hash equally."""
        assert hash(Real(2.0)) == hash(Complex(2.0, 0.0))
        assert len({Real(1.0), Complex(1.0, 0.0), Real(2.0)}) == 2

    def test_equal_tolerance(self):
        """Tolerance applies to both parts."""
        assert scalar_equal(Real(1.0), Real(1.0 + 1e-10), tol=1e-9)
        assert not scalar_equal(Real(1.0), Real(1.0 + 1e-10))

    def test_compare_with_number(self):
        """Scalars compare with Python numbers."""
        assert Real(2.0) == 2
        assert Complex(0.0, 1.0) == 1j

    def test_python_conversions(self):
        """complex() and float() conversions."""
        assert complex(Complex(1.0, 2.0)) == 1 + 2j
        assert complex(Real(1.0)) == 1 + 0j
        assert float(Real(1.5)) == 1.5
        assert math.isclose(abs(Complex(1.0, 1.0)), math.sqrt(2.0))

    def test_frozen(self):
        """Scalars are immutable."""
        with pytest.raises(AttributeError):
            Real(1.0).value = 2.0


class TestScalarConversion:
    """Tests for scalar/tensor conversion."""

    def test_to_tensor_real(self):
        """Real becomes a float64 0-d tensor."""
        t = scalar_to_tensor(Real(2.0))
        assert t.dim() == 0
        assert t.dtype == torch.float64

    def test_to_tensor_complex(self):
        """Complex becomes a complex128 0-d tensor."""
        t = scalar_to_tensor(Complex(1.0, 2.0))
        assert t.dtype == torch.complex128
        assert t.item() == 1 + 2j

    def test_to_tensor_never_narrows(self):
        """A complex value requested as float64 is promoted."""
        t = scalar_to_tensor(Complex(1.0, 2.0), torch.float64)
        assert t.is_complex()

    def test_from_tensor(self):
        """Single-element tensors convert by dtype."""
        assert scalar_from_tensor(torch.tensor([[3.0]])) == Real(3.0)
        c = scalar_from_tensor(torch.tensor(1.0 + 0j))
        assert isinstance(c, Complex)

    def test_from_tensor_with_many_elements_raises(self):
        """Only single-element tensors convert."""
        with pytest.raises(ScalarError):
            scalar_from_tensor(torch.tensor([1.0, 2.0]))
