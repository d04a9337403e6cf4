"""Value objects passed into the estimation core."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class EstimationInput:
    """Parameters for a single effort forecast.
    
    Attributes:
        current_estimate: Current effort estimate S (hours)
        target_effort: Acceptable budget K (hours)
        time_to_deadline: Horizon T (years)
        volatility: Estimation uncertainty sigma
        risk_free_rate: Assumed productivity growth rate r
    """
    
    current_estimate: float
    target_effort: float
    time_to_deadline: float
    volatility: float
    risk_free_rate: float = 0.0
    
    def __post_init__(self):
        """Validate the parameters the forecaster cannot clamp."""
        if self.current_estimate <= 0:
            raise ValueError(
                f"current_estimate must be positive, got {self.current_estimate}"
            )
        if self.target_effort <= 0:
            raise ValueError(
                f"target_effort must be positive, got {self.target_effort}"
            )


@dataclass(frozen=True)
class HistoricalObservations:
    """Paired planned/actual efforts of completed tasks.
    
    Attributes:
        planned: Planned effort per task (hours, non-zero)
        actual: Actual effort per task (hours)
    """
    
    planned: tuple[float, ...]
    actual: tuple[float, ...]
    
    def __len__(self) -> int:
        return len(self.planned)
    
    def relative_deviations(self) -> np.ndarray:
        """Deviation of each actual effort relative to its plan."""
        planned = np.asarray(self.planned, dtype=float)
        actual = np.asarray(self.actual, dtype=float)
        return (actual - planned) / planned
