"""pcafit - Principal Component Analysis fitting library.

This package fits PCA models to data matrices laid out with one observation
per column, and exposes the fitted model for projecting data into the
principal subspace and reconstructing it back.

Usage:
    >>> import numpy as np
    >>> from pcafit import fit
    >>>
    >>> X = np.random.randn(5, 200)   # 5 features, 200 observations
    >>> model = fit(X, maxoutdim=3, pratio=0.95)
    >>> Y = model.transform(X)        # shape (outdim, 200)
    >>> X_approx = model.reconstruct(Y)
    >>> print(model)
"""

# ============================================================================
# Main API
# ============================================================================

from pcafit.core.fitting import check_pcaparams, fit, pcacov, pcasvd
from pcafit.core.dimension import choose_pcadim, descending_order
from pcafit.models.options import (
    ComputeMean,
    ExplicitMean,
    MeanSpec,
    PCAMethod,
    ZeroMean,
)
from pcafit.models.pca import PCA
from pcafit.models.storage import PCAData, load_model, save_model
from pcafit.config import PCASettings, get_settings

# Reduction components
from pcafit import reduction

# Exceptions
from pcafit.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    ModelLoadError,
    NotFittedError,
    PCAError,
    PreconditionError,
)

# ============================================================================
# Package metadata
# ============================================================================

__version__ = "0.1.0"

__all__ = [
    # Main API
    "fit",
    "pcacov",
    "pcasvd",
    "check_pcaparams",
    "choose_pcadim",
    "descending_order",
    "PCA",
    "PCAMethod",
    "ComputeMean",
    "ZeroMean",
    "ExplicitMean",
    "MeanSpec",
    # Persistence
    "PCAData",
    "save_model",
    "load_model",
    # Configuration
    "PCASettings",
    "get_settings",
    # Exceptions
    "PCAError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "PreconditionError",
    "NotFittedError",
    "ModelLoadError",
    # Modules
    "reduction",
]
