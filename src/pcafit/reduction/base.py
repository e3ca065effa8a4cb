"""Invertible reducer protocol and helpers built on it."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class InvertibleReducer(Protocol):
    """A fitted linear map to a lower-dimensional space and back.

    Data is row-major, shape (n_samples, n_features); reduced data has shape
    (n_samples, n_components_). Size properties are None until fit() runs.
    """

    def fit(self, data: np.ndarray) -> "InvertibleReducer": ...

    def transform(self, data: np.ndarray) -> np.ndarray: ...

    def fit_transform(self, data: np.ndarray) -> np.ndarray: ...

    def inverse_transform(self, reduced: np.ndarray) -> np.ndarray:
        """Map reduced data back to feature space (lossy when components < features)."""
        ...

    @property
    def n_components_(self) -> int | None:
        """Number of retained components."""
        ...

    @property
    def components_(self) -> np.ndarray | None:
        """Retained axes, shape (n_components_, n_features)."""
        ...


def reconstruction_error(reducer: InvertibleReducer, data: np.ndarray) -> np.ndarray:
    """Per-sample squared error after a transform/inverse_transform round trip.

    Args:
        reducer: A fitted reducer
        data: Samples of shape (n_samples, n_features)

    Returns:
        Squared reconstruction error of each sample, shape (n_samples,)
    """
    data = np.asarray(data, dtype=np.float64)
    restored = reducer.inverse_transform(reducer.transform(data))
    return np.sum((data - restored) ** 2, axis=1)
