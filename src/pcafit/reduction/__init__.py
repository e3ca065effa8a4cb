"""Dimensionality reduction components for pcafit."""

from pcafit.reduction.base import InvertibleReducer, reconstruction_error
from pcafit.reduction.pca import PCAReducer

__all__ = ["InvertibleReducer", "PCAReducer", "reconstruction_error"]
