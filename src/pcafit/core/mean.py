"""Mean handling and covariance estimation.

Throughout pcafit a mean vector of length 0 stands for "zero mean": the data
was not centered. The helpers here apply that convention to single vectors of
shape (d,) and to matrices of shape (d, n) holding one observation per column.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from pcafit.exceptions import DimensionMismatchError, InvalidArgumentError
from pcafit.models.options import ComputeMean, ExplicitMean, MeanSpec, ZeroMean


def _as_columns(mean: np.ndarray, x: np.ndarray) -> np.ndarray:
    return mean if x.ndim == 1 else mean[:, np.newaxis]


def full_mean(d: int, mean: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Expand the empty-means-zero encoding to a vector of length d."""
    if mean.size == 0:
        return np.zeros(d, dtype=np.float64)
    if mean.shape[0] != d:
        raise DimensionMismatchError(
            f"Mean has length {mean.shape[0]}, expected {d}"
        )
    return mean


def centralize(x: np.ndarray, mean: npt.NDArray[np.float64]) -> np.ndarray:
    """Subtract the mean from every column of x (no-op for an empty mean)."""
    if mean.size == 0:
        return x
    return x - _as_columns(mean, x)


def decentralize(x: np.ndarray, mean: npt.NDArray[np.float64]) -> np.ndarray:
    """Add the mean back to every column of x (no-op for an empty mean)."""
    if mean.size == 0:
        return x
    return x + _as_columns(mean, x)


def preprocess_mean(X: np.ndarray, spec: MeanSpec) -> npt.NDArray[np.float64]:
    """Resolve the mean vector used to center X.

    Args:
        X: Data matrix of shape (d, n)
        spec: How the mean should be obtained

    Returns:
        The sample mean over columns, the explicit vector, or an empty vector
        when no centering is requested
    """
    if isinstance(spec, ComputeMean):
        return X.mean(axis=1)
    if isinstance(spec, ZeroMean):
        return np.empty(0, dtype=np.float64)
    if isinstance(spec, ExplicitMean):
        # An explicit mean never means "no centering", even when empty
        if spec.vector.shape[0] != X.shape[0]:
            raise DimensionMismatchError(
                f"Explicit mean has length {spec.vector.shape[0]}, expected {X.shape[0]}"
            )
        return spec.vector
    raise InvalidArgumentError(f"Unsupported mean specifier: {spec!r}")


def covm(X: np.ndarray, mean: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Unbiased sample covariance of the columns of X around a given mean.

    Args:
        X: Data matrix of shape (d, n)
        mean: Mean of length d, or empty for zero mean

    Returns:
        Symmetric covariance matrix of shape (d, d)
    """
    n = X.shape[1]
    if n < 2:
        raise InvalidArgumentError(
            f"Covariance estimation needs at least 2 observations, got {n}"
        )
    Z = centralize(X, mean)
    C = (Z @ Z.T) / (n - 1)
    return (C + C.T) / 2
