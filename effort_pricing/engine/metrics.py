"""Summary metrics over a batch of task risk reports.

Computes counts and aggregate overshoot/buffer hours for the risk breakdown.
"""

from typing import Sequence

from effort_pricing.engine.risk import RiskStatus, TaskRiskReport


def compute_risk_summary(reports: Sequence[TaskRiskReport]) -> dict[str, float]:
    """Compute summary statistics for a set of task risk reports.
    
    Args:
        reports: One TaskRiskReport per task
        
    Returns:
        Dictionary with keys:
            - total: Number of tasks
            - at_risk: Number of at-risk tasks
            - on_track: Number of on-track tasks
            - at_risk_percent: Share of at-risk tasks (0 when empty)
            - total_overshoot: Sum of overshoot hours over at-risk tasks
            - total_buffer: Sum of buffer hours over on-track tasks
    """
    at_risk = [r for r in reports if r.status == RiskStatus.AT_RISK]
    on_track = [r for r in reports if r.status == RiskStatus.ON_TRACK]
    total = len(reports)
    
    return {
        "total": total,
        "at_risk": len(at_risk),
        "on_track": len(on_track),
        "at_risk_percent": len(at_risk) * 100.0 / total if total else 0.0,
        "total_overshoot": float(sum(r.overshoot_or_buffer for r in at_risk)),
        "total_buffer": float(sum(r.overshoot_or_buffer for r in on_track)),
    }
