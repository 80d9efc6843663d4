"""Shared test configuration for torchcalculus tests."""

import hypothesis

# Convolution runs in Python loops; the first examples also pay for torch
# warm-up.
hypothesis.settings.register_profile("torchcalculus", deadline=None)
hypothesis.settings.load_profile("torchcalculus")
