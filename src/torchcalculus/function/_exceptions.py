"""Exception and warning hierarchy for tensor function operations."""


class TensorFunctionError(Exception):
    """Base exception for tensor function operations."""

    pass


class DomainError(TensorFunctionError):
    """Arguments outside the domain of an operation.

    Raised when a function is evaluated with fewer arguments than its
    arity, or when an operation refers to a variable the function does
    not have.
    """

    pass


class DegreeError(TensorFunctionError):
    """Raised when a derivative, integral or series order is invalid."""

    pass


class UnsupportedOperationError(TensorFunctionError, NotImplementedError):
    """Operation without a polynomial result.

    Raised for negative powers, division by a function and reciprocals of
    non-constant derivatives; distinguishes "not meaningful here" from a
    result that is legitimately zero.
    """

    pass


class CyclicDependencyError(TensorFunctionError):
    """Variables that depend on themselves through inner functions.

    Raised while validating the dependency graph of a total derivative;
    the whole computation is aborted.
    """

    pass


class ImplicitDerivativeWarning(UserWarning):
    """A total derivative was obtained by inverting a derivative."""

    pass


class TruncatedSeriesWarning(UserWarning):
    """A series expansion was truncated to a trivial result."""

    pass
