"""Pytest fixtures for pcafit tests."""

import numpy as np
import pytest

from pcafit.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def correlated_data() -> np.ndarray:
    """5 features x 200 observations with a decaying variance spectrum."""
    rng = np.random.default_rng(42)
    scales = np.array([5.0, 3.0, 1.0, 0.5, 0.1])
    latent = rng.standard_normal((5, 200)) * scales[:, np.newaxis]
    rotation, _ = np.linalg.qr(rng.standard_normal((5, 5)))
    offset = np.array([1.0, -2.0, 0.5, 3.0, 0.0])[:, np.newaxis]
    return rotation @ latent + offset


@pytest.fixture
def wide_data() -> np.ndarray:
    """50 features x 10 observations (more features than observations)."""
    rng = np.random.default_rng(7)
    return rng.standard_normal((50, 10)) + 2.0


@pytest.fixture
def colinear_data() -> np.ndarray:
    """2-D points lying exactly on the line y = 2x + 1."""
    x = np.linspace(-3.0, 3.0, 25)
    return np.vstack([x, 2.0 * x + 1.0])
