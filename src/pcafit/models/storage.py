"""Persistence schema for fitted PCA models.

This module provides a Pydantic model mirroring :class:`pcafit.models.pca.PCA`
so fitted models can be written to and read back from JSON. Structural checks
happen in two stages: the schema validates shapes, then rebuilding the PCA
re-runs the model's own invariants.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from pydantic import BaseModel, Field, ValidationError, model_validator

from pcafit.exceptions import ModelLoadError, PCAError
from pcafit.models.pca import PCA

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"


class PCAData(BaseModel):
    """Serialized PCA model.

    Attributes:
        version: Storage format version
        mean: Mean vector (empty for zero mean)
        projection: d x p projection matrix, stored row by row
        principal_vars: Variance of each principal component
        total_var: Total variance of the training data
    """

    version: str = Field(default=FORMAT_VERSION, description="Storage format version")
    mean: list[float] = Field(default_factory=list, description="Mean vector")
    projection: list[list[float]] = Field(..., description="d x p projection matrix")
    principal_vars: list[float] = Field(..., description="Principal variances")
    total_var: float = Field(..., ge=0.0, description="Total input variance")

    @model_validator(mode="after")
    def validate_projection_shape(self) -> "PCAData":
        """Ensure the projection is a non-ragged matrix.

        Raises:
            ValueError: If rows have different lengths or the matrix is empty
        """
        if not self.projection:
            raise ValueError("projection must have at least one row")
        widths = {len(row) for row in self.projection}
        if len(widths) != 1:
            raise ValueError(f"projection rows have inconsistent lengths: {sorted(widths)}")
        return self

    @classmethod
    def from_model(cls, model: PCA) -> "PCAData":
        """Build the storage representation of a fitted model."""
        return cls(
            mean=model.mean.tolist(),
            projection=model.projection.tolist(),
            principal_vars=model.principal_vars.tolist(),
            total_var=model.total_var,
        )

    def to_model(self) -> PCA:
        """Rebuild the fitted model, re-checking its invariants."""
        return PCA(
            np.asarray(self.mean, dtype=np.float64),
            np.asarray(self.projection, dtype=np.float64),
            np.asarray(self.principal_vars, dtype=np.float64),
            self.total_var,
        )


def save_model(model: PCA, path: str | Path) -> None:
    """Write a fitted model to a JSON file.

    Args:
        model: Fitted PCA model
        path: Output path
    """
    path = Path(path)
    path.write_text(PCAData.from_model(model).model_dump_json(indent=2), encoding="utf-8")
    logger.info(f"Saved PCA model to {path}")


def load_model(path: str | Path) -> PCA:
    """Read a fitted model from a JSON file.

    Args:
        path: Path written by save_model()

    Returns:
        The fitted PCA model

    Raises:
        ModelLoadError: If the file is missing, malformed or violates PCA
            invariants
    """
    path = Path(path)
    logger.info(f"Loading PCA model from {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ModelLoadError(f"Cannot read model file {path}: {e}") from e

    try:
        data = PCAData.model_validate_json(raw)
    except ValidationError as e:
        raise ModelLoadError(f"Model validation failed: {e}") from e

    if data.version != FORMAT_VERSION:
        raise ModelLoadError(
            f"Unsupported model format version {data.version!r}, expected {FORMAT_VERSION!r}"
        )

    try:
        return data.to_model()
    except PCAError as e:
        raise ModelLoadError(f"Stored model is inconsistent: {e}") from e
