"""Testing utilities for torchcalculus.

Example usage:

    import hypothesis

    from torchcalculus.testing.strategies import tensor_functions

    @hypothesis.given(tensor_functions(), tensor_functions())
    def test_add_commutes(f, g):
        assert tensor_function_equal(f + g, g + f)
"""
