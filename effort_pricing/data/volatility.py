"""Caller-side volatility resolution.

The raw estimator returns the true computed value. Callers that derive a
volatility from history apply two recoveries on top: unusable data or a
non-finite result falls back to a default, and values below the forecaster's
minimum volatility are raised to it.
"""

import logging
import math
from typing import Sequence

from effort_pricing.engine.forecaster import MIN_VOLATILITY
from effort_pricing.model.errors import EstimationError
from effort_pricing.model.interfaces import VolatilityEstimator
from effort_pricing.model.volatility import FALLBACK_VOLATILITY, HistoricalVolatilityEstimator

logger = logging.getLogger(__name__)


def resolve_history_volatility(
    planned: Sequence[float] | None,
    actual: Sequence[float] | None,
    estimator: VolatilityEstimator | None = None,
    floor: float = MIN_VOLATILITY,
    fallback: float = FALLBACK_VOLATILITY,
) -> float:
    """Estimate a usable volatility from historical efforts.
    
    Args:
        planned: Planned efforts of completed tasks
        actual: Actual efforts of the same tasks
        estimator: Volatility estimator, defaults to the historical one
        floor: Minimum volatility returned
        fallback: Volatility used when the data is rejected or gives a
            non-finite result
        
    Returns:
        Estimated volatility, floored at `floor`
    """
    estimator = estimator or HistoricalVolatilityEstimator()
    
    try:
        volatility = estimator.estimate(planned, actual)
    except EstimationError as e:
        logger.warning(f"Cannot estimate volatility from history ({e}); using {fallback:.2%}")
        return fallback
    
    if not math.isfinite(volatility):
        logger.warning(f"Historical efforts gave a non-finite volatility; using {fallback:.2%}")
        return fallback
    
    if volatility < floor:
        logger.warning(f"Estimated volatility {volatility:.4f} is too low; using minimum {floor:.2%}")
        return floor
    
    return volatility
