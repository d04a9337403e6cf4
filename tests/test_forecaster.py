"""Tests for the closed-form effort forecaster."""

import math

import numpy as np
import pytest
from effort_pricing.engine.forecaster import EffortForecaster, forecast_effort
from effort_pricing.model.normal import ErfNormalDistribution
from effort_pricing.model.parameters import EstimationInput


def test_forecast_textbook_call_price():
    """Test the formula against a textbook call price (Hull, S=42, K=40)."""
    assert forecast_effort(42.0, 40.0, 0.5, 0.2, 0.1) == pytest.approx(4.76, abs=0.01)


def test_forecast_scenarios():
    """Test forecasts for under-budget and over-budget estimates."""
    under = forecast_effort(50.0, 60.0, 0.5, 0.225, 0.0)
    over = forecast_effort(40.0, 35.0, 0.3, 0.225, 0.0)
    
    assert under == pytest.approx(0.54, abs=0.03)
    assert over == pytest.approx(5.33, abs=0.05)


def test_forecast_deep_in_the_money():
    """Test that a certain overrun forecasts S - K exp(-rT)."""
    assert forecast_effort(100.0, 10.0, 1.0, 0.3, 0.0) == pytest.approx(90.0)
    assert forecast_effort(100.0, 10.0, 1.0, 0.3, 0.05) == pytest.approx(
        100.0 - 10.0 * math.exp(-0.05)
    )


def test_non_positive_horizon_returns_current_estimate():
    """Test T <= 0 short-circuits to S."""
    assert forecast_effort(50.0, 60.0, 0.0, 0.2, 0.05) == 50.0
    assert forecast_effort(50.0, 10.0, -1.0, 0.0, 0.3) == 50.0


def test_non_positive_volatility_is_clamped():
    """Test sigma <= 0 behaves like sigma = 0.01."""
    clamped = forecast_effort(50.0, 48.0, 0.5, 0.01, 0.05)
    
    assert forecast_effort(50.0, 48.0, 0.5, 0.0, 0.05) == clamped
    assert forecast_effort(50.0, 48.0, 0.5, -0.4, 0.05) == clamped


def test_forecast_monotonic_in_current_estimate():
    """Test forecast is non-decreasing in S."""
    forecasts = [forecast_effort(s, 50.0, 0.5, 0.3, 0.05) for s in np.linspace(5, 150, 60)]
    
    for previous, current in zip(forecasts, forecasts[1:]):
        assert current >= previous - 1e-6


def test_forecast_monotonic_in_target():
    """Test forecast is non-increasing in K."""
    forecasts = [forecast_effort(50.0, k, 0.5, 0.3, 0.05) for k in np.linspace(5, 150, 60)]
    
    for previous, current in zip(forecasts, forecasts[1:]):
        assert current <= previous + 1e-6


def test_non_positive_current_estimate_propagates_nan():
    """Test ln(S/K) of a negative ratio yields NaN instead of raising."""
    assert math.isnan(forecast_effort(-5.0, 10.0, 1.0, 0.2, 0.0))


def test_forecast_is_idempotent():
    """Test repeated forecasts are bit-identical."""
    first = forecast_effort(37.5, 41.0, 0.25, 0.18, 0.03)
    second = forecast_effort(37.5, 41.0, 0.25, 0.18, 0.03)
    
    assert first == second


def test_alternative_distribution_agrees():
    """Test swapping in the exact CDF changes the forecast negligibly."""
    exact = EffortForecaster(ErfNormalDistribution())
    default = EffortForecaster()
    
    for s, k in [(50.0, 60.0), (40.0, 35.0), (42.0, 40.0)]:
        assert default.forecast(s, k, 0.5, 0.25, 0.05) == pytest.approx(
            exact.forecast(s, k, 0.5, 0.25, 0.05), abs=1e-5
        )


def test_forecast_input():
    """Test forecasting from an EstimationInput value object."""
    params = EstimationInput(
        current_estimate=42.0,
        target_effort=40.0,
        time_to_deadline=0.5,
        volatility=0.2,
        risk_free_rate=0.1,
    )
    
    assert EffortForecaster().forecast_input(params) == forecast_effort(42.0, 40.0, 0.5, 0.2, 0.1)


def test_estimation_input_rejects_non_positive_efforts():
    """Test EstimationInput validates S and K."""
    with pytest.raises(ValueError, match="current_estimate must be positive"):
        EstimationInput(current_estimate=0.0, target_effort=10.0, time_to_deadline=1.0, volatility=0.2)
    with pytest.raises(ValueError, match="target_effort must be positive"):
        EstimationInput(current_estimate=10.0, target_effort=-1.0, time_to_deadline=1.0, volatility=0.2)
