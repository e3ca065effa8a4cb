"""PCA training: parameter checks, the two numerical paths and fit()."""

from __future__ import annotations

import logging
import numbers

import numpy as np
import numpy.typing as npt
from scipy import linalg
from sklearn.utils.validation import check_array

from pcafit.config import get_settings
from pcafit.core.dimension import choose_pcadim, descending_order
from pcafit.core.mean import centralize, covm, preprocess_mean
from pcafit.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    PreconditionError,
)
from pcafit.models.options import MeanSpec, PCAMethod, as_mean_spec
from pcafit.models.pca import PCA

logger = logging.getLogger(__name__)


def check_pcaparams(
    d: int,
    mean: npt.NDArray[np.float64],
    maxoutdim: int,
    pratio: float,
) -> None:
    """Validate fitting parameters before any decomposition.

    Raises:
        DimensionMismatchError: If mean is neither empty nor of length d
        PreconditionError: If maxoutdim is not a positive integer
        InvalidArgumentError: If pratio is not in (0, 1]
    """
    if not (mean.size == 0 or mean.shape[0] == d):
        raise DimensionMismatchError("Incorrect length of mean.")
    if (
        isinstance(maxoutdim, bool)
        or not isinstance(maxoutdim, numbers.Integral)
        or maxoutdim < 1
    ):
        raise PreconditionError("maxoutdim must be a positive integer.")
    if not (0.0 < pratio <= 1.0):
        raise InvalidArgumentError(
            "pratio must be a positive real value with pratio <= 1.0."
        )


def _resolve_pratio(pratio: float | None) -> float:
    return get_settings().default_pratio if pratio is None else pratio


def pcacov(
    C: npt.NDArray[np.float64],
    mean: npt.NDArray[np.float64],
    maxoutdim: int | None = None,
    pratio: float | None = None,
) -> PCA:
    """Fit PCA from a covariance matrix.

    Args:
        C: Symmetric covariance matrix of shape (d, d)
        mean: Mean used to compute C (empty for zero mean)
        maxoutdim: Maximum number of components (default: d)
        pratio: Retained variance ratio (default: settings.default_pratio)

    Returns:
        Fitted PCA model whose total variance is the trace of C
    """
    C = np.asarray(C, dtype=np.float64)
    mean = np.asarray(mean, dtype=np.float64)
    d = C.shape[0]
    maxoutdim = d if maxoutdim is None else maxoutdim
    pratio = _resolve_pratio(pratio)
    check_pcaparams(d, mean, maxoutdim, pratio)

    evals, evecs = linalg.eigh(C)
    order = descending_order(evals)
    vsum = float(evals.sum())
    k = choose_pcadim(evals, order, vsum, maxoutdim, pratio)
    logger.debug(f"Covariance path: {d} eigenvalues, keeping {k}")

    si = order[:k]
    return PCA(mean, evecs[:, si], evals[si], vsum)


def pcasvd(
    Z: npt.NDArray[np.float64],
    mean: npt.NDArray[np.float64],
    tw: float,
    maxoutdim: int | None = None,
    pratio: float | None = None,
) -> PCA:
    """Fit PCA from centered data via singular value decomposition.

    Args:
        Z: Centered data of shape (d, n)
        mean: Mean subtracted from the data (empty for zero mean)
        tw: Total sample weight; singular values s become variances s**2 / tw
        maxoutdim: Maximum number of components (default: min(d, n))
        pratio: Retained variance ratio (default: settings.default_pratio)

    Returns:
        Fitted PCA model
    """
    Z = np.asarray(Z, dtype=np.float64)
    mean = np.asarray(mean, dtype=np.float64)
    d, n = Z.shape
    maxoutdim = min(d, n) if maxoutdim is None else maxoutdim
    pratio = _resolve_pratio(pratio)
    check_pcaparams(d, mean, maxoutdim, pratio)
    if not tw > 0:
        raise InvalidArgumentError(f"tw must be positive, got {tw}")

    U, s, _ = linalg.svd(Z, full_matrices=False)
    v = s**2 / tw
    order = descending_order(v)
    vsum = float(v.sum())
    k = choose_pcadim(v, order, vsum, maxoutdim, pratio)
    logger.debug(f"SVD path: {len(v)} singular values, keeping {k}")

    si = order[:k]
    return PCA(mean, U[:, si], v[si], vsum)


def fit(
    X: npt.ArrayLike,
    method: PCAMethod | str = PCAMethod.AUTO,
    maxoutdim: int | None = None,
    pratio: float | None = None,
    mean: MeanSpec | npt.ArrayLike | None = None,
) -> PCA:
    """Fit a PCA model to a data matrix.

    Args:
        X: Data of shape (d, n), one observation per column
        method: "auto", "cov" or "svd". Auto uses the covariance path when
            d < n and the SVD path otherwise.
        maxoutdim: Maximum number of components (default: d)
        pratio: Minimum fraction of variance to retain (default: 0.99, see
            PCASettings)
        mean: ComputeMean() / None for the sample mean, ZeroMean() / 0 for no
            centering, or an explicit vector of length d

    Returns:
        Fitted PCA model

    Raises:
        DimensionMismatchError: If the mean length does not match d
        InvalidArgumentError: If pratio or method is invalid
        PreconditionError: If maxoutdim is not a positive integer
    """
    X = check_array(X, dtype=np.float64, ensure_min_samples=1, ensure_min_features=1)
    d, n = X.shape
    method = PCAMethod.coerce(method)
    maxoutdim = d if maxoutdim is None else maxoutdim
    pratio = _resolve_pratio(pratio)

    if method is PCAMethod.AUTO:
        method = PCAMethod.COV if d < n else PCAMethod.SVD

    mv = preprocess_mean(X, as_mean_spec(mean))
    check_pcaparams(d, mv, maxoutdim, pratio)
    logger.info(f"Fitting PCA on {d} features x {n} observations ({method.value})")

    if method is PCAMethod.COV:
        C = covm(X, mv)
        model = pcacov(C, mv, maxoutdim=maxoutdim, pratio=pratio)
    elif method is PCAMethod.SVD:
        Z = centralize(X, mv)
        model = pcasvd(Z, mv, n, maxoutdim=maxoutdim, pratio=pratio)
    else:
        raise InvalidArgumentError(f"Invalid method name {method}")

    logger.info(f"PCA fitting complete: {model}")
    return model
