"""Custom exceptions for pcafit.

This module defines a hierarchy of exceptions raised while validating inputs,
fitting and using PCA models. Validation errors also derive from the matching
builtin so callers catching ``ValueError`` keep working.
"""

from __future__ import annotations


class PCAError(Exception):
    """Base exception for all pcafit operations.

    This is the root exception that all other pcafit exceptions inherit from.
    """


class DimensionMismatchError(PCAError, ValueError):
    """Raised when array dimensions are inconsistent.

    This exception is raised when:
    - The mean vector length is neither 0 nor the input dimensionality
    - The number of principal variances differs from the projection columns
    - Data passed to transform()/reconstruct() has the wrong dimensionality
    """


class InvalidArgumentError(PCAError, ValueError):
    """Raised when an argument value is outside its accepted domain.

    This exception is raised when:
    - pratio is not in (0, 1]
    - The fitting method is not one of auto, cov or svd
    - Retained variance exceeds total variance beyond tolerance
    - Data is too small for the requested fitting path
    """


class PreconditionError(PCAError, ValueError):
    """Raised when a structural precondition is not met.

    This exception is raised when:
    - maxoutdim is not a positive integer
    """


class NotFittedError(PCAError, RuntimeError):
    """Raised when a reducer is used before fit() has been called."""


class ModelLoadError(PCAError):
    """Raised when a persisted model cannot be read or parsed.

    This exception is raised when:
    - The model file is missing or unreadable
    - The stored JSON does not match the model schema
    - The stored arrays violate PCA model invariants
    """
