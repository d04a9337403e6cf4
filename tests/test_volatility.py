"""Tests for historical volatility estimation."""

import numpy as np
import pytest
from effort_pricing.model import get_volatility_estimator
from effort_pricing.model.errors import InvalidInputError, LengthMismatchError
from effort_pricing.model.parameters import HistoricalObservations
from effort_pricing.model.volatility import (
    HistoricalVolatilityEstimator,
    estimate_volatility,
)


def test_zero_deviation_gives_zero_volatility():
    """Test that plans matching actuals have no volatility."""
    assert estimate_volatility([10, 20], [10, 20]) == 0.0


def test_constant_relative_deviation_gives_zero_volatility():
    """Test that a uniform 10% overrun has no dispersion."""
    assert estimate_volatility([10, 20], [11, 22]) == pytest.approx(0.0, abs=1e-12)


def test_single_pair_returns_fallback():
    """Test fallback when there is too little data."""
    assert estimate_volatility([10], [12]) == 0.3
    assert estimate_volatility([], []) == 0.3
    assert HistoricalVolatilityEstimator(fallback=0.5).estimate([10], [12]) == 0.5


def test_sample_standard_deviation():
    """Test estimator uses Bessel-corrected standard deviation."""
    planned = [10, 20, 40]
    actual = [12, 18, 50]
    
    expected = np.std([0.2, -0.1, 0.25], ddof=1)
    
    assert estimate_volatility(planned, actual) == pytest.approx(expected, rel=1e-12)
    assert estimate_volatility(planned, actual) == pytest.approx(0.1893, abs=1e-4)


def test_scale_invariance():
    """Test doubling all efforts leaves volatility unchanged."""
    planned = [10, 20, 40, 8]
    actual = [12, 18, 50, 9]
    
    base = estimate_volatility(planned, actual)
    doubled = estimate_volatility([2 * p for p in planned], [2 * a for a in actual])
    
    assert doubled == pytest.approx(base, rel=1e-12)


def test_length_mismatch_raises():
    """Test mismatched sequences raise LengthMismatchError."""
    with pytest.raises(LengthMismatchError, match="same length"):
        estimate_volatility([10, 20, 30], [10, 20])


def test_missing_sequence_raises():
    """Test absent sequences raise InvalidInputError."""
    with pytest.raises(InvalidInputError):
        estimate_volatility(None, [10, 20])
    with pytest.raises(InvalidInputError):
        estimate_volatility([10, 20], None)


def test_errors_are_value_errors():
    """Test core errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        estimate_volatility([1.0], [1.0, 2.0])


def test_relative_deviations():
    """Test relative deviations are computed per pair."""
    observations = HistoricalObservations(planned=(10.0, 20.0), actual=(12.0, 15.0))
    
    np.testing.assert_allclose(observations.relative_deviations(), [0.2, -0.25])
    assert len(observations) == 2


def test_registry_lookup():
    """Test volatility estimator registry."""
    assert isinstance(get_volatility_estimator("historical"), HistoricalVolatilityEstimator)
    
    with pytest.raises(ValueError, match="Unknown volatility estimator"):
        get_volatility_estimator("garch")
