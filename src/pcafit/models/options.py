"""Fitting options: method selector and mean specifiers."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

import numpy as np

from pcafit.exceptions import DimensionMismatchError, InvalidArgumentError


class PCAMethod(str, Enum):
    """Numerical path used to fit a PCA model.

    Attributes:
        AUTO: Pick COV when there are fewer features than observations, else SVD
        COV: Eigendecomposition of the d x d covariance matrix
        SVD: Singular value decomposition of the centered d x n data
    """

    AUTO = "auto"
    COV = "cov"
    SVD = "svd"

    @classmethod
    def coerce(cls, value: "PCAMethod | str") -> "PCAMethod":
        """Convert a method name to a PCAMethod.

        Raises:
            InvalidArgumentError: If the value is not a recognized method
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(f"Invalid method name {value!r}") from None


@dataclass(frozen=True)
class ComputeMean:
    """Center data on the sample mean across observations."""


@dataclass(frozen=True)
class ZeroMean:
    """Do not center the data."""


@dataclass(frozen=True, eq=False)
class ExplicitMean:
    """Center data on a caller-supplied mean vector.

    Attributes:
        vector: Mean of length d
    """

    vector: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        vec = np.asarray(self.vector, dtype=np.float64)
        # Column vectors of shape (d, 1) come from mean(axis=1, keepdims=True)
        if vec.ndim == 2 and vec.shape[1] == 1:
            vec = vec[:, 0]
        if vec.ndim != 1:
            raise DimensionMismatchError(
                f"Explicit mean must be a 1-D vector, got shape {vec.shape}"
            )
        object.__setattr__(self, "vector", vec)


MeanSpec = Union[ComputeMean, ZeroMean, ExplicitMean]


def as_mean_spec(mean: "MeanSpec | np.ndarray | list[float] | int | None") -> MeanSpec:
    """Normalize the mean argument accepted by fit().

    ``None`` means compute the sample mean, ``0`` means no centering and any
    1-D array-like (or (d, 1) column) is used as an explicit mean.
    """
    if isinstance(mean, (ComputeMean, ZeroMean, ExplicitMean)):
        return mean
    if mean is None:
        return ComputeMean()
    if isinstance(mean, numbers.Real) and not isinstance(mean, bool) and mean == 0:
        return ZeroMean()
    return ExplicitMean(np.asarray(mean))


__all__ = [
    "PCAMethod",
    "ComputeMean",
    "ZeroMean",
    "ExplicitMean",
    "MeanSpec",
    "as_mean_spec",
]
