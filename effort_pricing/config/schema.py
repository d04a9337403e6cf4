"""Pydantic configuration schemas.

Defines validated data structures for tasks, volatility sources, and the
batch estimation config.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from effort_pricing.model import NORMAL_DISTRIBUTIONS, VOLATILITY_ESTIMATORS


class HistoryConfig(BaseModel):
    """Planned/actual efforts of completed tasks.
    
    Attributes:
        planned: Planned effort per task (hours)
        actual: Actual effort per task (hours)
    """
    
    planned: list[float] = Field(..., description="Planned efforts (hours)")
    actual: list[float] = Field(..., description="Actual efforts (hours)")
    
    @field_validator("planned")
    @classmethod
    def validate_planned_nonzero(cls, planned):
        """Relative deviations divide by the planned effort."""
        if any(p == 0 for p in planned):
            raise ValueError("Planned efforts must be non-zero")
        return planned


class VolatilitySource(BaseModel):
    """Where a volatility comes from: a direct value or historical data."""
    
    value: float | None = Field(default=None, gt=0, description="Direct volatility (must be > 0)")
    history: HistoryConfig | None = None
    
    @model_validator(mode="after")
    def validate_exactly_one(self):
        """Ensure exactly one of value/history is set."""
        if (self.value is None) == (self.history is None):
            raise ValueError("Volatility source needs exactly one of 'value' or 'history'")
        return self


class TaskConfig(BaseModel):
    """Configuration for a single task.
    
    Attributes:
        name: Task label
        current_estimate: S, current effort estimate (hours)
        target_effort: K, acceptable budget (hours)
        time_to_deadline: T, remaining time (years)
        risk_free_rate: r, productivity growth rate
        volatility: Per-task volatility source (per_task mode only)
    """
    
    name: str = Field(..., min_length=1)
    current_estimate: float = Field(..., gt=0, description="Current estimate in hours (must be > 0)")
    target_effort: float = Field(..., gt=0, description="Target effort in hours (must be > 0)")
    time_to_deadline: float = Field(..., gt=0, description="Time to deadline in years (must be > 0)")
    risk_free_rate: float = Field(default=0.05, description="Productivity growth rate")
    volatility: VolatilitySource | None = None


class EstimationConfig(BaseModel):
    """Top-level estimation configuration.
    
    Attributes:
        normal_distribution: Name of the CDF approximation
        volatility_estimator: Name of the historical volatility estimator
        volatility_mode: "common" shares one volatility, "per_task" reads each task's
        common_volatility: Volatility source used in common mode
        min_volatility: Floor applied to history-derived volatilities
        fallback_volatility: Used when historical data is unusable
        tasks: Tasks to estimate
    """
    
    normal_distribution: str = Field(default="hart", description="CDF approximation name")
    volatility_estimator: str = Field(default="historical", description="Volatility estimator name")
    volatility_mode: Literal["common", "per_task"] = "common"
    common_volatility: VolatilitySource = Field(
        default_factory=lambda: VolatilitySource(value=0.3)
    )
    min_volatility: float = Field(default=0.01, gt=0)
    fallback_volatility: float = Field(default=0.3, gt=0)
    tasks: list[TaskConfig] = Field(..., min_length=1)
    
    @field_validator("normal_distribution")
    @classmethod
    def validate_normal_distribution(cls, name):
        """Ensure the CDF approximation is registered."""
        if name not in NORMAL_DISTRIBUTIONS:
            raise ValueError(
                f"Unknown normal distribution '{name}'. "
                f"Available: {', '.join(NORMAL_DISTRIBUTIONS)}"
            )
        return name
    
    @field_validator("volatility_estimator")
    @classmethod
    def validate_volatility_estimator(cls, name):
        """Ensure the volatility estimator is registered."""
        if name not in VOLATILITY_ESTIMATORS:
            raise ValueError(
                f"Unknown volatility estimator '{name}'. "
                f"Available: {', '.join(VOLATILITY_ESTIMATORS)}"
            )
        return name
    
    @model_validator(mode="after")
    def validate_task_volatilities(self):
        """In per_task mode every task must carry its own volatility."""
        if self.volatility_mode == "per_task":
            missing = [t.name for t in self.tasks if t.volatility is None]
            if missing:
                raise ValueError(
                    f"volatility_mode is 'per_task' but tasks have no volatility: "
                    f"{', '.join(missing)}"
                )
        return self
