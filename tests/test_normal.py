"""Tests for standard normal CDF approximations."""

import pytest
from effort_pricing.model import get_normal_distribution
from effort_pricing.model.normal import (
    ErfNormalDistribution,
    HartNormalDistribution,
    cumulative_distribution,
)

GRID = [i / 4 for i in range(-40, 41)]


def test_cdf_at_zero_is_half():
    """Test that Phi(0) is 0.5."""
    assert cumulative_distribution(0.0) == pytest.approx(0.5, abs=1e-6)


def test_cdf_known_quantile():
    """Test the 97.5% quantile of the standard normal."""
    assert cumulative_distribution(1.96) == pytest.approx(0.9750021, abs=1e-6)
    assert cumulative_distribution(-1.96) == pytest.approx(0.0249979, abs=1e-6)


def test_cdf_saturates_in_tails():
    """Test that values beyond +/-7 saturate exactly."""
    assert cumulative_distribution(-10) == 0.0
    assert cumulative_distribution(10) == 1.0
    assert cumulative_distribution(float("-inf")) == 0.0
    assert cumulative_distribution(float("inf")) == 1.0


def test_cdf_range_and_symmetry():
    """Test Phi stays in [0, 1] and Phi(-x) = 1 - Phi(x)."""
    for x in GRID:
        value = cumulative_distribution(x)
        assert 0.0 <= value <= 1.0
        assert cumulative_distribution(-x) == pytest.approx(1.0 - value, abs=1e-6)


def test_hart_matches_erf():
    """Test the polynomial approximation against the exact CDF."""
    hart = HartNormalDistribution()
    exact = ErfNormalDistribution()
    
    for x in GRID:
        assert hart.cumulative_distribution(x) == pytest.approx(
            exact.cumulative_distribution(x), abs=1e-7
        )


def test_cdf_is_idempotent():
    """Test repeated calls give bit-identical results."""
    hart = HartNormalDistribution()
    assert hart.cumulative_distribution(0.3721) == hart.cumulative_distribution(0.3721)


def test_registry_lookup():
    """Test registry returns instances and rejects unknown names."""
    assert isinstance(get_normal_distribution("hart"), HartNormalDistribution)
    assert isinstance(get_normal_distribution("erf"), ErfNormalDistribution)
    
    with pytest.raises(ValueError, match="Unknown normal distribution 'probit'"):
        get_normal_distribution("probit")
