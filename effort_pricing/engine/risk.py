"""Task risk classification from a forecast and its target."""

from dataclasses import dataclass
from enum import Enum


class RiskStatus(str, Enum):
    """Whether a forecast stays under its target effort."""
    
    ON_TRACK = "on_track"
    AT_RISK = "at_risk"


@dataclass(frozen=True)
class RiskAssessment:
    """Classification of a single forecast.
    
    Attributes:
        status: ON_TRACK or AT_RISK
        magnitude: Overshoot (at risk) or buffer (on track) in hours
        percent: Magnitude as a percentage of the target effort
    """
    
    status: RiskStatus
    magnitude: float
    percent: float


@dataclass(frozen=True)
class TaskRiskReport:
    """Per-task risk figures collected for summary reporting."""
    
    forecasted_effort: float
    target_effort: float
    status: RiskStatus
    overshoot_or_buffer: float
    overshoot_or_buffer_percent: float


def classify_risk(forecasted_effort: float, target_effort: float) -> RiskAssessment:
    """Classify a forecast against its target effort.
    
    A forecast equal to the target counts as at risk. The target must be
    positive.
    
    Args:
        forecasted_effort: Forecast from EffortForecaster (hours)
        target_effort: Budget the task should stay within (hours)
        
    Returns:
        RiskAssessment with status, magnitude and percentage
    """
    if forecasted_effort >= target_effort:
        status = RiskStatus.AT_RISK
        magnitude = forecasted_effort - target_effort
    else:
        status = RiskStatus.ON_TRACK
        magnitude = target_effort - forecasted_effort
    
    return RiskAssessment(
        status=status,
        magnitude=magnitude,
        percent=magnitude * 100 / target_effort,
    )


def build_risk_report(forecasted_effort: float, target_effort: float) -> TaskRiskReport:
    """Classify a forecast and package it as a TaskRiskReport."""
    assessment = classify_risk(forecasted_effort, target_effort)
    return TaskRiskReport(
        forecasted_effort=forecasted_effort,
        target_effort=target_effort,
        status=assessment.status,
        overshoot_or_buffer=assessment.magnitude,
        overshoot_or_buffer_percent=assessment.percent,
    )
