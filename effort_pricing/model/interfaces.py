"""Protocol definitions for the estimation core.

The forecaster depends only on these interfaces, so normal-distribution
approximations and volatility estimators can be swapped without touching
the forecasting formula.
"""

from typing import Protocol, Sequence


class NormalDistribution(Protocol):
    """Protocol for standard normal CDF implementations."""

    def cumulative_distribution(self, x: float) -> float:
        """Evaluate the standard normal CDF.
        
        Args:
            x: Point at which to evaluate Phi
            
        Returns:
            Probability in [0, 1]
        """
        ...


class VolatilityEstimator(Protocol):
    """Protocol for estimators deriving volatility from past tasks."""

    def estimate(
        self,
        planned: Sequence[float] | None,
        actual: Sequence[float] | None,
    ) -> float:
        """Estimate volatility from paired planned/actual efforts.
        
        Args:
            planned: Planned effort per completed task (hours)
            actual: Actual effort per completed task (hours)
            
        Returns:
            Non-negative volatility figure
        """
        ...
