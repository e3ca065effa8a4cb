"""Fixtures for reduction unit tests."""

import numpy as np
import pytest


@pytest.fixture
def tall_samples():
    """Generate row-major samples (100 samples, 20 features)."""
    np.random.seed(42)
    return np.random.randn(100, 20)


@pytest.fixture
def wide_samples():
    """Generate row-major samples (10 samples, 40 features)."""
    np.random.seed(42)
    return np.random.randn(10, 40)
