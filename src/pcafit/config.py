"""Library configuration settings."""

from functools import lru_cache

import numpy as np
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PCASettings(BaseSettings):
    """Default fitting parameters and numeric tolerances.

    Values can be overridden with ``PCAFIT_``-prefixed environment variables
    or a local ``.env`` file, e.g. ``PCAFIT_DEFAULT_PRATIO=0.95``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PCAFIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_pratio: float = Field(
        default=0.99,
        gt=0.0,
        le=1.0,
        description="Retained variance ratio used when fit() gets no pratio",
    )

    # Tolerances for the retained <= total variance check
    variance_rtol: float = Field(
        default=float(np.sqrt(np.finfo(np.float64).eps)),
        ge=0.0,
        description="Relative tolerance when comparing retained and total variance",
    )
    variance_atol: float = Field(
        default=0.0,
        ge=0.0,
        description="Absolute tolerance when comparing retained and total variance",
    )


@lru_cache(maxsize=1)
def get_settings() -> PCASettings:
    """Return the process-wide settings, read once from the environment."""
    return PCASettings()
