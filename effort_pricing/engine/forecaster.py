"""Closed-form effort forecast.

Adapts the Black-Scholes call price to effort estimation:

    d1 = [ln(S/K) + (r + sigma^2 / 2) T] / (sigma sqrt(T))
    d2 = d1 - sigma sqrt(T)
    forecast = S Phi(d1) - K exp(-r T) Phi(d2)

where S is the current estimate, K the target effort, T the time to the
deadline in years, sigma the volatility and r the productivity growth rate.
"""

import numpy as np

from effort_pricing.model.interfaces import NormalDistribution
from effort_pricing.model.normal import HartNormalDistribution
from effort_pricing.model.parameters import EstimationInput

MIN_VOLATILITY = 0.01


class EffortForecaster:
    """Forecasts probability-weighted effort for a task.
    
    Stateless apart from the injected CDF, so one instance can serve any
    number of tasks concurrently.
    """
    
    def __init__(self, normal_distribution: NormalDistribution | None = None):
        """Initialize the forecaster.
        
        Args:
            normal_distribution: CDF implementation, defaults to the
                polynomial approximation
        """
        self.normal_distribution = normal_distribution or HartNormalDistribution()
    
    def forecast(
        self,
        current_estimate: float,
        target_effort: float,
        time_to_deadline: float,
        volatility: float,
        risk_free_rate: float,
    ) -> float:
        """Forecast effort for a single task.
        
        A non-positive horizon returns the current estimate unchanged and a
        non-positive volatility is clamped to MIN_VOLATILITY. Current estimate
        and target are not validated: non-positive values yield NaN.
        
        Args:
            current_estimate: S, current effort estimate (hours)
            target_effort: K, acceptable budget (hours)
            time_to_deadline: T, horizon (years)
            volatility: sigma
            risk_free_rate: r
            
        Returns:
            Forecasted effort (hours)
        """
        if time_to_deadline <= 0:
            return current_estimate
        if volatility <= 0:
            volatility = MIN_VOLATILITY
        
        sigma_sqrt_t = volatility * np.sqrt(time_to_deadline)
        with np.errstate(divide="ignore", invalid="ignore"):
            log_ratio = np.log(np.float64(current_estimate) / target_effort)
        
        d1 = (log_ratio + (risk_free_rate + volatility ** 2 / 2) * time_to_deadline) / sigma_sqrt_t
        d2 = d1 - sigma_sqrt_t
        
        n1 = self.normal_distribution.cumulative_distribution(float(d1))
        n2 = self.normal_distribution.cumulative_distribution(float(d2))
        
        discount = np.exp(-risk_free_rate * time_to_deadline)
        return float(current_estimate * n1 - target_effort * discount * n2)
    
    def forecast_input(self, params: EstimationInput) -> float:
        """Forecast effort from a validated EstimationInput."""
        return self.forecast(
            params.current_estimate,
            params.target_effort,
            params.time_to_deadline,
            params.volatility,
            params.risk_free_rate,
        )


def forecast_effort(
    current_estimate: float,
    target_effort: float,
    time_to_deadline: float,
    volatility: float,
    risk_free_rate: float,
) -> float:
    """Forecast effort with the default CDF approximation."""
    return _DEFAULT.forecast(
        current_estimate, target_effort, time_to_deadline, volatility, risk_free_rate
    )


_DEFAULT = EffortForecaster()
