"""Batch effort estimation engine.

Evaluates each task independently with an injected forecaster; no I/O and
no state shared between tasks.
"""

from dataclasses import dataclass
from typing import Sequence

import pandas as pd
from pydantic import BaseModel, ConfigDict

from effort_pricing.engine.forecaster import EffortForecaster
from effort_pricing.engine.metrics import compute_risk_summary
from effort_pricing.engine.risk import TaskRiskReport, build_risk_report


@dataclass(frozen=True)
class TaskSpec:
    """Fully resolved inputs for one task.
    
    Attributes:
        name: Task label
        current_estimate: S (hours)
        target_effort: K (hours)
        time_to_deadline: T (years)
        volatility: sigma, already resolved from a value or history
        risk_free_rate: r
    """
    
    name: str
    current_estimate: float
    target_effort: float
    time_to_deadline: float
    volatility: float
    risk_free_rate: float = 0.05


@dataclass(frozen=True)
class TaskEstimation:
    """A task together with its forecast and risk report."""
    
    spec: TaskSpec
    report: TaskRiskReport
    
    @property
    def name(self) -> str:
        return self.spec.name
    
    @property
    def forecast(self) -> float:
        return self.report.forecasted_effort
    
    def to_record(self) -> dict:
        """Flatten into a row for tabular output."""
        return {
            "task": self.spec.name,
            "current_estimate": self.spec.current_estimate,
            "target_effort": self.spec.target_effort,
            "time_to_deadline": self.spec.time_to_deadline,
            "volatility": self.spec.volatility,
            "risk_free_rate": self.spec.risk_free_rate,
            "forecast": self.report.forecasted_effort,
            "status": self.report.status.value,
            "overshoot_or_buffer": self.report.overshoot_or_buffer,
            "overshoot_or_buffer_percent": self.report.overshoot_or_buffer_percent,
        }


class EstimationResult(BaseModel):
    """Container for batch estimation results.
    
    Attributes:
        tasks: Per-task estimations in input order
        table: DataFrame with one row per task
        summary: Risk breakdown from compute_risk_summary
    """
    
    model_config = ConfigDict(arbitrary_types_allowed=True)
    
    tasks: list[TaskEstimation]
    table: pd.DataFrame
    summary: dict[str, float]


def estimate_task(spec: TaskSpec, forecaster: EffortForecaster) -> TaskEstimation:
    """Forecast and classify a single task."""
    forecast = forecaster.forecast(
        spec.current_estimate,
        spec.target_effort,
        spec.time_to_deadline,
        spec.volatility,
        spec.risk_free_rate,
    )
    return TaskEstimation(spec=spec, report=build_risk_report(forecast, spec.target_effort))


def run_estimation(
    tasks: Sequence[TaskSpec],
    forecaster: EffortForecaster,
) -> EstimationResult:
    """Estimate a batch of tasks.
    
    Args:
        tasks: Resolved task specifications
        forecaster: Forecaster with the desired CDF approximation
        
    Returns:
        EstimationResult with per-task rows and the risk summary
    """
    estimations = [estimate_task(spec, forecaster) for spec in tasks]
    
    table = pd.DataFrame(
        [e.to_record() for e in estimations],
        columns=list(_COLUMNS),
    )
    summary = compute_risk_summary([e.report for e in estimations])
    
    return EstimationResult(tasks=estimations, table=table, summary=summary)


_COLUMNS = (
    "task",
    "current_estimate",
    "target_effort",
    "time_to_deadline",
    "volatility",
    "risk_free_rate",
    "forecast",
    "status",
    "overshoot_or_buffer",
    "overshoot_or_buffer_percent",
)
