from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from typing import Union

import torch
from torch import Tensor

from ._exceptions import ScalarError


@dataclass(frozen=True, eq=False)
class Real:
    """Real number.

    Attributes
    ----------
    value : float
        The value.

    Examples
    --------
    >>> Real(2.0) + Complex(1.0, 1.0)
    Complex(re=3.0, im=1.0)
    """

    value: float

    @property
    def re(self) -> float:
        return self.value

    @property
    def im(self) -> float:
        return 0.0

    def __add__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_add

        return scalar_add(self, scalar(other))

    def __radd__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_add

        return scalar_add(scalar(other), self)

    def __sub__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_subtract

        return scalar_subtract(self, scalar(other))

    def __rsub__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_subtract

        return scalar_subtract(scalar(other), self)

    def __mul__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_multiply

        return scalar_multiply(self, scalar(other))

    def __rmul__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_multiply

        return scalar_multiply(scalar(other), self)

    def __truediv__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_divide

        return scalar_divide(self, other)

    def __rtruediv__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_divide

        return scalar_divide(scalar(other), self)

    def __neg__(self) -> "Scalar":
        from ._scalar_arithmetic import scalar_negate

        return scalar_negate(self)

    def __abs__(self) -> float:
        from ._scalar_properties import scalar_abs

        return scalar_abs(self)

    def __eq__(self, other) -> bool:
        from ._scalar_properties import scalar_equal

        try:
            other = scalar(other)
        except ScalarError:
            return NotImplemented

        return scalar_equal(self, other)

    def __hash__(self) -> int:
        return hash(complex(self.re, self.im))

    def __complex__(self) -> complex:
        return complex(self.value, 0.0)

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True, eq=False)
class Complex:
    """Complex number.

    Attributes
    ----------
    re : float
        Real part.
    im : float
        Imaginary part.

    Examples
    --------
    >>> Complex(3.0, 4.0) / Complex(3.0, 4.0) == Real(1.0)
    True
    """

    re: float
    im: float

    def __add__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_add

        return scalar_add(self, scalar(other))

    def __radd__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_add

        return scalar_add(scalar(other), self)

    def __sub__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_subtract

        return scalar_subtract(self, scalar(other))

    def __rsub__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_subtract

        return scalar_subtract(scalar(other), self)

    def __mul__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_multiply

        return scalar_multiply(self, scalar(other))

    def __rmul__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_multiply

        return scalar_multiply(scalar(other), self)

    def __truediv__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_divide

        return scalar_divide(self, other)

    def __rtruediv__(self, other) -> "Scalar":
        from ._scalar_arithmetic import scalar_divide

        return scalar_divide(scalar(other), self)

    def __neg__(self) -> "Scalar":
        from ._scalar_arithmetic import scalar_negate

        return scalar_negate(self)

    def __abs__(self) -> float:
        from ._scalar_properties import scalar_abs

        return scalar_abs(self)

    def __eq__(self, other) -> bool:
        from ._scalar_properties import scalar_equal

        try:
            other = scalar(other)
        except ScalarError:
            return NotImplemented

        return scalar_equal(self, other)

    def __hash__(self) -> int:
        return hash(complex(self.re, self.im))

    def __complex__(self) -> complex:
        return complex(self.re, self.im)


Scalar = Union[Real, Complex]

# Signed runs of digits and dots, each optionally followed by "i".
_NUMBER_TERM = re.compile(r"([+-]*)([\d.]*)(i?)")


def _parse_number(s: str) -> Scalar:
    s = re.sub(r"\s+", "", s)
    if not s:
        raise ScalarError("Cannot parse an empty string as a number")

    real = 0.0
    imag = 0.0
    position = 0
    while position < len(s):
        match = _NUMBER_TERM.match(s, position)
        signs, digits, imaginary = match.groups()
        if match.end() == position or (not digits and not imaginary):
            raise ScalarError(f"Cannot parse {s!r} as a number")

        sign = -1.0 if signs.count("-") % 2 else 1.0
        if not digits:
            digits = "1"

        try:
            value = sign * float(digits)
        except ValueError:
            raise ScalarError(f"Cannot parse {s!r} as a number") from None

        if imaginary:
            imag += value
        else:
            real += value

        position = match.end()

    if imag == 0.0:
        return Real(real)

    return Complex(real, imag)


def scalar(value) -> Scalar:
    """Create a scalar from a Python number, a 0-d tensor or a string.

    Parameters
    ----------
    value : Real, Complex, int, float, complex, Tensor or str
        Value to convert. Strings follow the form ``"a+bi"`` where either
        part may be omitted (``"2"``, ``"-i"``, ``"1.5-2i"``).

    Returns
    -------
    Scalar
        ``Complex`` for complex inputs with a non-zero imaginary part, or
        for complex tensors; ``Real`` otherwise.

    Raises
    ------
    ScalarError
        If the value cannot be interpreted as a number.

    Examples
    --------
    >>> scalar("1+2i")
    Complex(re=1.0, im=2.0)
    >>> scalar(3)
    Real(value=3.0)
    """
    if isinstance(value, (Real, Complex)):
        return value

    if isinstance(value, Tensor):
        from ._scalar_conversion import scalar_from_tensor

        return scalar_from_tensor(value)

    if isinstance(value, str):
        return _parse_number(value)

    if isinstance(value, bool):
        raise ScalarError("Booleans are not numbers")

    if isinstance(value, numbers.Real):
        return Real(float(value))

    if isinstance(value, numbers.Complex):
        value = complex(value)
        if value.imag == 0.0:
            return Real(value.real)
        return Complex(value.real, value.imag)

    raise ScalarError(f"Cannot convert {type(value).__name__} to a scalar")


def is_complex(value: Scalar) -> bool:
    """Return True when the scalar is the Complex variant."""
    return isinstance(value, Complex)


def _dtype(value: Scalar) -> torch.dtype:
    if is_complex(value):
        return torch.complex128
    return torch.float64
