import warnings

from ._exceptions import DegreeError, TruncatedSeriesWarning


def _check_terms(terms: int, name: str) -> None:
    if terms < 0:
        raise DegreeError(
            f"Number of {name} series terms must be non-negative, got {terms}"
        )

    if terms == 0:
        warnings.warn(
            f"A {name} series with no terms is the zero function",
            TruncatedSeriesWarning,
            stacklevel=3,
        )
