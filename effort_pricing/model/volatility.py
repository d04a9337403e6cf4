"""Historical volatility estimation.

Volatility is the sample standard deviation (Bessel-corrected) of the
relative deviations

    d_i = (actual_i - planned_i) / planned_i

over completed tasks, which makes it independent of task size.
"""

from typing import Sequence

import numpy as np

from effort_pricing.model.errors import InvalidInputError, LengthMismatchError
from effort_pricing.model.interfaces import VolatilityEstimator
from effort_pricing.model.parameters import HistoricalObservations

# Used when there are too few observations to measure dispersion
FALLBACK_VOLATILITY = 0.3
MIN_OBSERVATIONS = 2


class HistoricalVolatilityEstimator(VolatilityEstimator):
    """Relative-deviation volatility from past planned/actual efforts.
    
    Assumes deviations are homoscedastic across the sampled tasks.
    """
    
    def __init__(self, fallback: float = FALLBACK_VOLATILITY):
        """Initialize the estimator.
        
        Args:
            fallback: Volatility returned when fewer than two pairs exist
        """
        self.fallback = fallback
    
    def estimate(
        self,
        planned: Sequence[float] | None,
        actual: Sequence[float] | None,
    ) -> float:
        """Estimate volatility from paired planned/actual efforts.
        
        Args:
            planned: Planned effort per completed task (hours, non-zero)
            actual: Actual effort per completed task (hours)
            
        Returns:
            Sample standard deviation of relative deviations, or the
            fallback when fewer than two pairs are given
            
        Raises:
            InvalidInputError: If either sequence is None
            LengthMismatchError: If the sequences differ in length
        """
        if planned is None or actual is None:
            raise InvalidInputError("Planned and actual efforts must be provided")
        
        if len(planned) != len(actual):
            raise LengthMismatchError(
                f"Planned efforts ({len(planned)}) and actual efforts "
                f"({len(actual)}) must have the same length"
            )
        
        if len(planned) < MIN_OBSERVATIONS:
            return self.fallback
        
        observations = HistoricalObservations(tuple(planned), tuple(actual))
        deviations = observations.relative_deviations()
        
        variance = np.sum((deviations - deviations.mean()) ** 2) / (len(deviations) - 1)
        return float(abs(np.sqrt(variance)))


def estimate_volatility(
    planned: Sequence[float] | None,
    actual: Sequence[float] | None,
) -> float:
    """Estimate volatility with the default historical estimator."""
    return HistoricalVolatilityEstimator().estimate(planned, actual)
