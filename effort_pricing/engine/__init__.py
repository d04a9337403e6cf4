"""Effort forecasting, risk classification and batch estimation."""

from effort_pricing.engine.forecaster import EffortForecaster, forecast_effort
from effort_pricing.engine.risk import RiskStatus, classify_risk

__all__ = [
    "EffortForecaster",
    "RiskStatus",
    "classify_risk",
    "forecast_effort",
]
