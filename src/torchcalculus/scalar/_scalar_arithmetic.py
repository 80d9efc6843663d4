from __future__ import annotations

from typing import Union

from ._exceptions import DivisionByZeroError
from ._scalar import Complex, Real, Scalar, scalar
from ._scalar_properties import scalar_abs


def scalar_add(a: Scalar, b: Scalar) -> Scalar:
    """Add two scalars, promoting to Complex when either operand is Complex."""
    match (a, b):
        case (Real(x), Real(y)):
            return Real(x + y)
        case _:
            return Complex(a.re + b.re, a.im + b.im)


def scalar_subtract(a: Scalar, b: Scalar) -> Scalar:
    """Subtract two scalars, promoting to Complex when either operand is Complex."""
    match (a, b):
        case (Real(x), Real(y)):
            return Real(x - y)
        case _:
            return Complex(a.re - b.re, a.im - b.im)


def scalar_multiply(a: Scalar, b: Scalar) -> Scalar:
    """Multiply two scalars.

    The product is computed with the complex formula
    ``(a.re*b.re - a.im*b.im, a.re*b.im + a.im*b.re)``; the imaginary part
    of two Real operands is identically zero, so they stay Real.
    """
    re = a.re * b.re - a.im * b.im
    im = a.re * b.im + a.im * b.re

    match (a, b):
        case (Real(), Real()):
            return Real(re)
        case _:
            return Complex(re, im)


def scalar_divide(a: Scalar, b: Union[Scalar, float]) -> Scalar:
    """Divide a scalar by a scalar or a raw float.

    Two Real operands divide as floats. Otherwise the quotient is taken with
    Python's complex division, which scales by the larger part of the
    divisor instead of squaring it, so tiny and huge divisors neither
    underflow nor overflow.

    Parameters
    ----------
    a : Scalar
        Dividend.
    b : Scalar or float
        Divisor.

    Returns
    -------
    Scalar
        Quotient ``a / b``.

    Raises
    ------
    DivisionByZeroError
        If the magnitude of ``b`` is exactly zero.

    Examples
    --------
    >>> scalar_divide(Complex(1.0, 2.0), Complex(1.0, 2.0))
    Complex(re=1.0, im=0.0)
    >>> scalar_divide(Real(1e200), Real(1e200))
    Real(value=1.0)
    """
    b = scalar(b)

    if scalar_abs(b) == 0.0:
        raise DivisionByZeroError(f"Cannot divide {a} by zero")

    match (a, b):
        case (Real(x), Real(y)):
            return Real(x / y)
        case _:
            quotient = complex(a.re, a.im) / complex(b.re, b.im)
            return Complex(quotient.real, quotient.imag)


def scalar_negate(a: Scalar) -> Scalar:
    """Negate a scalar."""
    match a:
        case Real(x):
            return Real(-x)
        case Complex(x, y):
            return Complex(-x, -y)
