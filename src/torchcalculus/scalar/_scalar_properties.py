from __future__ import annotations

import math

from ._scalar import Complex, Real, Scalar


def scalar_abs(a: Scalar) -> float:
    """Magnitude of a scalar."""
    match a:
        case Real(x):
            return abs(x)
        case Complex(x, y):
            return math.hypot(x, y)


def scalar_real(a: Scalar) -> Real:
    """Real part of a scalar, as a Real."""
    return Real(a.re)


def scalar_imag(a: Scalar) -> Real:
    """Imaginary part of a scalar, as a Real."""
    return Real(a.im)


def scalar_conjugate(a: Scalar) -> Scalar:
    """Complex conjugate; a Real is its own conjugate."""
    match a:
        case Real():
            return a
        case Complex(x, y):
            return Complex(x, -y)


def scalar_equal(a: Scalar, b: Scalar, tol: float = 0.0) -> bool:
    """Check scalar equality within an absolute tolerance.

    Equality is structural on ``(re, im)``: a Real compares equal to a
    Complex with the same real part and a zero imaginary part.

    Parameters
    ----------
    a, b : Scalar
        Scalars to compare.
    tol : float
        Absolute tolerance applied to both parts (default exact).

    Returns
    -------
    bool
        True if both parts agree within ``tol``.
    """
    return abs(a.re - b.re) <= tol and abs(a.im - b.im) <= tol
