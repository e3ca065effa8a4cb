"""PCA dimensionality reducer."""

from __future__ import annotations

import numpy as np

from pcafit.core.fitting import fit
from pcafit.exceptions import NotFittedError
from pcafit.models.options import MeanSpec, PCAMethod
from pcafit.models.pca import PCA
from pcafit.reduction.base import InvertibleReducer


class PCAReducer(InvertibleReducer):
    """PCA reducer with an sklearn-style interface.

    Wraps :func:`pcafit.fit` for data laid out as (n_samples, n_features),
    the transpose of the column-observation layout used by the core API.

    Example:
        >>> reducer = PCAReducer(maxoutdim=50, pratio=0.95)
        >>> reduced = reducer.fit_transform(embeddings)
    """

    def __init__(
        self,
        maxoutdim: int | None = None,
        pratio: float | None = None,
        method: PCAMethod | str = PCAMethod.AUTO,
        mean: MeanSpec | np.ndarray | None = None,
    ) -> None:
        """Initialize PCA reducer.

        Args:
            maxoutdim: Maximum number of components (default: n_features)
            pratio: Fraction of variance to retain (default: 0.99)
            method: Fitting method, "auto", "cov" or "svd" (default: "auto")
            mean: Mean specifier passed to fit() (default: sample mean)
        """
        self.maxoutdim = maxoutdim
        self.pratio = pratio
        self.method = PCAMethod.coerce(method)
        self.mean = mean
        self._model: PCA | None = None

    def fit(self, data: np.ndarray) -> "PCAReducer":
        """Fit the reducer on data.

        Args:
            data: Input data of shape (n_samples, n_features)

        Returns:
            Self
        """
        data = np.asarray(data, dtype=np.float64)
        self._model = fit(
            data.T,
            method=self.method,
            maxoutdim=self.maxoutdim,
            pratio=self.pratio,
            mean=self.mean,
        )
        return self

    def transform(self, data: np.ndarray) -> np.ndarray:
        """Transform data to reduced dimensions.

        Args:
            data: Input data of shape (n_samples, n_features)

        Returns:
            Reduced data of shape (n_samples, n_components)
        """
        model = self._require_model("transform")
        return model.transform(np.asarray(data, dtype=np.float64).T).T

    def fit_transform(self, data: np.ndarray) -> np.ndarray:
        """Fit the reducer and transform data.

        Args:
            data: Input data of shape (n_samples, n_features)

        Returns:
            Reduced data of shape (n_samples, n_components)
        """
        return self.fit(data).transform(data)

    def inverse_transform(self, reduced: np.ndarray) -> np.ndarray:
        """Reconstruct approximate data from reduced coordinates.

        Args:
            reduced: Reduced data of shape (n_samples, n_components)

        Returns:
            Reconstructed data of shape (n_samples, n_features)
        """
        model = self._require_model("inverse_transform")
        return model.reconstruct(np.asarray(reduced, dtype=np.float64).T).T

    def _require_model(self, op: str) -> PCA:
        if self._model is None:
            raise NotFittedError(
                f"Reducer must be fitted before {op}. Call fit() first."
            )
        return self._model

    @property
    def model_(self) -> PCA | None:
        """The fitted PCA model."""
        return self._model

    @property
    def n_components_(self) -> int | None:
        """Number of retained components."""
        if self._model is None:
            return None
        return self._model.outdim

    @property
    def components_(self) -> np.ndarray | None:
        """Principal axes in feature space, shape (n_components, n_features)."""
        if self._model is None:
            return None
        return self._model.projection.T

    @property
    def explained_variance_(self) -> np.ndarray | None:
        """Variance captured by each component."""
        if self._model is None:
            return None
        return self._model.principal_vars

    @property
    def explained_variance_ratio_(self) -> np.ndarray | None:
        """Share of total variance captured by each component."""
        if self._model is None:
            return None
        return self._model.principal_vars / self._model.total_var

    def __repr__(self) -> str:
        return (
            f"PCAReducer(maxoutdim={self.maxoutdim}, pratio={self.pratio}, "
            f"method='{self.method.value}')"
        )
