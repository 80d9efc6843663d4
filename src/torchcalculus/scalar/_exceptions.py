"""Scalar module exceptions."""


class ScalarError(Exception):
    """Base exception for scalar operations."""

    pass


class DivisionByZeroError(ScalarError, ZeroDivisionError):
    """Division by a scalar whose magnitude is exactly zero.

    Raised instead of returning zero or infinity so that the failure
    propagates to the caller.
    """

    pass
