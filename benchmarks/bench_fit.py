"""Benchmark the covariance and SVD fitting paths."""

import numpy as np
import pytest

from pcafit import fit


@pytest.mark.benchmark
@pytest.mark.parametrize("method", ["cov", "svd"])
@pytest.mark.parametrize(("d", "n"), [(10, 5000), (100, 1000), (1000, 50)])
def bench_fit(benchmark, rng, method, d, n):
    """Benchmark fitting on tall and wide data with both paths."""
    X = rng.standard_normal((d, n))

    def _fit():
        return fit(X, method=method, pratio=0.9)

    model = benchmark(_fit)
    assert model.indim == d


@pytest.mark.benchmark
@pytest.mark.parametrize("n", [100, 10000])
def bench_transform(benchmark, rng, n):
    """Benchmark projecting and reconstructing a batch of observations."""
    model = fit(rng.standard_normal((100, 2000)), maxoutdim=20, pratio=1.0)
    X = rng.standard_normal((100, n))

    def _round_trip():
        return model.reconstruct(model.transform(X))

    result = benchmark(_round_trip)
    assert result.shape == (100, n)
