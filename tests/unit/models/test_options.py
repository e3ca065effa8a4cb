"""Tests for fitting options."""

import numpy as np
import pytest

from pcafit.exceptions import DimensionMismatchError, InvalidArgumentError
from pcafit.models.options import (
    ComputeMean,
    ExplicitMean,
    PCAMethod,
    ZeroMean,
    as_mean_spec,
)


class TestPCAMethod:
    """Test PCAMethod enum."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("auto", PCAMethod.AUTO), ("cov", PCAMethod.COV), ("svd", PCAMethod.SVD)],
    )
    def test_coerce_strings(self, name, expected):
        """Test method names map to enum members."""
        assert PCAMethod.coerce(name) is expected

    def test_coerce_member(self):
        """Test enum members pass through unchanged."""
        assert PCAMethod.coerce(PCAMethod.SVD) is PCAMethod.SVD

    def test_coerce_unknown(self):
        """Test unknown names raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Invalid method name 'eig'"):
            PCAMethod.coerce("eig")


class TestMeanSpec:
    """Test mean specifier coercion."""

    def test_none_computes(self):
        """Test None means compute the sample mean."""
        assert isinstance(as_mean_spec(None), ComputeMean)

    def test_zero_means_no_centering(self):
        """Test 0 means no centering."""
        assert isinstance(as_mean_spec(0), ZeroMean)
        assert isinstance(as_mean_spec(0.0), ZeroMean)

    def test_vector_is_explicit(self):
        """Test array-likes become explicit means."""
        spec = as_mean_spec([1, 2, 3])
        assert isinstance(spec, ExplicitMean)
        assert spec.vector.dtype == np.float64
        np.testing.assert_array_equal(spec.vector, [1.0, 2.0, 3.0])

    def test_specs_pass_through(self):
        """Test existing specifiers are returned as-is."""
        spec = ZeroMean()
        assert as_mean_spec(spec) is spec

    def test_empty_vector_is_explicit(self):
        """Test an empty vector is an explicit mean, not zero mean."""
        assert isinstance(as_mean_spec(np.empty(0)), ExplicitMean)

    @pytest.mark.parametrize("value", [np.int64(0), np.float32(0.0), np.intp(0)])
    def test_numpy_zero_means_no_centering(self, value):
        """Test numpy zero scalars also mean no centering."""
        assert isinstance(as_mean_spec(value), ZeroMean)

    def test_column_vector_flattened(self):
        """Test a (d, 1) column mean is accepted as a vector."""
        spec = as_mean_spec(np.array([[1.0], [2.0], [3.0]]))
        assert spec.vector.shape == (3,)
        np.testing.assert_array_equal(spec.vector, [1.0, 2.0, 3.0])

    @pytest.mark.parametrize("value", [3, np.int64(2), np.ones((2, 2))])
    def test_non_vector_rejected(self, value):
        """Test scalars other than 0 and matrices are dimension mismatches."""
        with pytest.raises(DimensionMismatchError, match="1-D vector"):
            as_mean_spec(value)
