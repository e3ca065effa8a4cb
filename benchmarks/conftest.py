"""Shared pytest fixtures for benchmarks."""

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator for reproducible benchmark data."""
    return np.random.default_rng(42)
