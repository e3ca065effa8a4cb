"""Fitted PCA model."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import numpy.typing as npt

from pcafit.config import get_settings
from pcafit.core.mean import centralize, decentralize
from pcafit.core.mean import full_mean as expand_mean
from pcafit.exceptions import DimensionMismatchError, InvalidArgumentError


def _frozen_copy(values: npt.ArrayLike, ndim: int, name: str) -> npt.NDArray[np.float64]:
    arr = np.array(values, dtype=np.float64, copy=True)
    if arr.ndim != ndim:
        raise DimensionMismatchError(
            f"{name} must be {ndim}-dimensional, got shape {arr.shape}"
        )
    arr.setflags(write=False)
    return arr


def variance_within_total(tpvar: float, tvar: float) -> bool:
    """Check retained variance does not exceed total variance.

    Exceeding is tolerated when both values are approximately equal under the
    configured relative and absolute tolerances.
    """
    if tpvar <= tvar:
        return True
    settings = get_settings()
    scale = max(abs(tpvar), abs(tvar))
    return abs(tpvar - tvar) <= settings.variance_atol + settings.variance_rtol * scale


@dataclass(frozen=True, eq=False)
class PCA:
    """Principal component analysis model.

    Instances are produced by :func:`pcafit.fit` and never change afterwards;
    the stored arrays are read-only copies.

    Attributes:
        mean: Sample mean of length d, or empty when no centering was applied
        projection: d x p matrix whose columns are the principal directions
        principal_vars: Variance along each principal direction (length p)
        total_var: Total variance of the input data
        total_principal_var: Sum of principal_vars

    Example:
        >>> model = fit(X, maxoutdim=3)
        >>> Y = model.transform(X)
        >>> X_approx = model.reconstruct(Y)
    """

    mean: npt.NDArray[np.float64] = field(repr=False)
    projection: npt.NDArray[np.float64] = field(repr=False)
    principal_vars: npt.NDArray[np.float64] = field(repr=False)
    total_var: float
    total_principal_var: float = field(init=False)

    def __post_init__(self) -> None:
        mean = _frozen_copy(self.mean, 1, "mean")
        proj = _frozen_copy(self.projection, 2, "projection")
        pvars = _frozen_copy(self.principal_vars, 1, "principal_vars")
        d, p = proj.shape

        if not (mean.size == 0 or mean.shape[0] == d):
            raise DimensionMismatchError(
                "Dimensions of mean and projection are inconsistent."
            )
        if pvars.shape[0] != p:
            raise DimensionMismatchError(
                "Dimensions of projection and principal_vars are inconsistent."
            )

        tvar = float(self.total_var)
        tpvar = float(pvars.sum())
        if not variance_within_total(tpvar, tvar):
            raise InvalidArgumentError(
                "principal variance cannot exceed total variance."
            )

        object.__setattr__(self, "mean", mean)
        object.__setattr__(self, "projection", proj)
        object.__setattr__(self, "principal_vars", pvars)
        object.__setattr__(self, "total_var", tvar)
        object.__setattr__(self, "total_principal_var", tpvar)

    # Properties

    @property
    def indim(self) -> int:
        """Input dimensionality d."""
        return self.projection.shape[0]

    @property
    def outdim(self) -> int:
        """Output dimensionality p."""
        return self.projection.shape[1]

    @property
    def full_mean(self) -> npt.NDArray[np.float64]:
        """Mean of length d; zeros when the model stores no mean."""
        return expand_mean(self.indim, self.mean)

    def principal_var(self, i: int) -> float:
        """Variance of the i-th principal component (0-based)."""
        return float(self.principal_vars[i])

    @property
    def total_residual_var(self) -> float:
        """Variance not captured by the principal components."""
        return self.total_var - self.total_principal_var

    @property
    def principal_ratio(self) -> float:
        """Fraction of total variance retained by the principal components.

        NaN when the input data had no variance at all.
        """
        if self.total_var == 0:
            return float("nan")
        return self.total_principal_var / self.total_var

    # Use

    def transform(self, x: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Project data onto the principal subspace.

        Args:
            x: Vector of shape (d,) or matrix of shape (d, n), one observation
                per column

        Returns:
            Array of shape (p,) or (p, n)
        """
        x = self._check_input(x, self.indim, "transform")
        return self.projection.T @ centralize(x, self.mean)

    def reconstruct(self, y: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Map principal components back to the input space.

        Lossy whenever outdim < indim.

        Args:
            y: Vector of shape (p,) or matrix of shape (p, n)

        Returns:
            Array of shape (d,) or (d, n)
        """
        y = self._check_input(y, self.outdim, "reconstruct")
        return decentralize(self.projection @ y, self.mean)

    @staticmethod
    def _check_input(values: npt.ArrayLike, dim: int, op: str) -> np.ndarray:
        arr = np.asarray(values, dtype=np.float64)
        if arr.ndim not in (1, 2) or arr.shape[0] != dim:
            raise DimensionMismatchError(
                f"{op}() expects {dim} rows, got array of shape {arr.shape}"
            )
        return arr

    def __repr__(self) -> str:
        return (
            f"PCA(indim={self.indim}, outdim={self.outdim}, "
            f"principal_ratio={self.principal_ratio:.5f})"
        )
