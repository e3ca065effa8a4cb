"""pcafit Exceptions Module.

This module contains exception classes used throughout the pcafit library.
"""

from pcafit.exceptions.core import (
    DimensionMismatchError,
    InvalidArgumentError,
    ModelLoadError,
    NotFittedError,
    PCAError,
    PreconditionError,
)

__all__ = [
    "PCAError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "PreconditionError",
    "NotFittedError",
    "ModelLoadError",
]
