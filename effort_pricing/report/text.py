"""Plain-text rendering of estimation results."""

from typing import Sequence

from effort_pricing.engine.estimation import TaskEstimation
from effort_pricing.engine.metrics import compute_risk_summary
from effort_pricing.engine.risk import RiskStatus

STATUS_LABELS = {
    RiskStatus.ON_TRACK: "On track",
    RiskStatus.AT_RISK: "At risk",
}

AT_RISK_RECOMMENDATIONS = (
    "Reduce the scope of the task",
    "Assign additional resources to the task",
    "Review the estimate with experts",
    "Consider moving the deadline",
)

ON_TRACK_SUGGESTIONS = (
    "Use the freed capacity for at-risk tasks",
    "Improve the quality of the deliverable",
    "Take on additional work in the same timeframe",
)

NO_TASKS_MESSAGE = "No tasks were added."

_HEADER = (
    f"| {'Task':<15} | {'Current (h)':>11} | {'Target (h)':>10} | {'Deadline (y)':>12} "
    f"| {'Volatility':>10} | {'Forecast (h)':>12} | {'Status':<9} |"
)


def render_summary_table(tasks: Sequence[TaskEstimation]) -> str:
    """Render the per-task results as a fixed-width table.
    
    Args:
        tasks: Estimated tasks in display order
        
    Returns:
        Multi-line table string
    """
    rule = "=" * len(_HEADER)
    lines = ["SUMMARY", rule, _HEADER, rule]
    
    for task in tasks:
        spec = task.spec
        lines.append(
            f"| {spec.name:<15} | {spec.current_estimate:>11.1f} | {spec.target_effort:>10.1f} "
            f"| {spec.time_to_deadline:>12.3f} | {spec.volatility:>10.1%} "
            f"| {task.forecast:>12.1f} | {STATUS_LABELS[task.report.status]:<9} |"
        )
    
    lines.append(rule)
    return "\n".join(lines)


def render_risk_analysis(tasks: Sequence[TaskEstimation]) -> str:
    """Render counts, per-task overshoot/buffer and recommendations.
    
    Args:
        tasks: Estimated tasks
        
    Returns:
        Multi-line report, or a short message when there are no tasks
    """
    if not tasks:
        return NO_TASKS_MESSAGE
    
    summary = compute_risk_summary([t.report for t in tasks])
    at_risk = [t for t in tasks if t.report.status == RiskStatus.AT_RISK]
    on_track = [t for t in tasks if t.report.status == RiskStatus.ON_TRACK]
    
    lines = [
        "RISK ANALYSIS",
        f"- Total tasks: {summary['total']}",
        f"- At-risk tasks: {summary['at_risk']} ({summary['at_risk_percent']:.1f}%)",
        f"- On-track tasks: {summary['on_track']}",
    ]
    
    if at_risk:
        lines += ["", "AT-RISK TASKS:"]
        for task in at_risk:
            lines.append(
                f"- {task.name}: over by {task.report.overshoot_or_buffer:.1f} h "
                f"({task.report.overshoot_or_buffer_percent:.1f}%)"
            )
        lines += ["", "RECOMMENDATIONS FOR AT-RISK TASKS:"]
        lines += [f"{i}. {text}" for i, text in enumerate(AT_RISK_RECOMMENDATIONS, start=1)]
    
    if on_track:
        lines += ["", "ON-TRACK TASKS:"]
        for task in on_track:
            lines.append(
                f"- {task.name}: buffer of {task.report.overshoot_or_buffer:.1f} h "
                f"({task.report.overshoot_or_buffer_percent:.1f}%)"
            )
        lines += ["", "POSSIBLE ACTIONS:"]
        lines += [f"* {text}" for text in ON_TRACK_SUGGESTIONS]
    
    return "\n".join(lines)
