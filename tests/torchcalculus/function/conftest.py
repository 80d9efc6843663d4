"""Test fixtures for tensor function tests."""

import pytest

from torchcalculus.function import tensor_function_variable


@pytest.fixture
def x():
    """The identity function on variable 0."""
    return tensor_function_variable(0)


@pytest.fixture
def y():
    """The identity function on variable 1."""
    return tensor_function_variable(1)
