"""Artifact writing for batch estimation runs."""

import json
import logging
from pathlib import Path

from effort_pricing.engine.estimation import EstimationResult
from effort_pricing.report.text import render_risk_analysis, render_summary_table

logger = logging.getLogger(__name__)


def write_artifacts(result: EstimationResult, outdir: str | Path) -> dict[str, Path]:
    """Write results.csv, summary.json and report.md to a directory.
    
    Args:
        result: Output of run_estimation
        outdir: Target directory, created if missing
        
    Returns:
        Mapping from artifact name to written path
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    
    paths = {
        "results": outdir / "results.csv",
        "summary": outdir / "summary.json",
        "report": outdir / "report.md",
    }
    
    result.table.to_csv(paths["results"], index=False)
    
    with open(paths["summary"], "w") as f:
        json.dump(result.summary, f, indent=2)
    
    report = "\n\n".join([
        "# Effort Forecast Report",
        "```\n" + render_summary_table(result.tasks) + "\n```",
        "```\n" + render_risk_analysis(result.tasks) + "\n```",
    ])
    paths["report"].write_text(report + "\n")
    
    for name, path in paths.items():
        logger.debug(f"Wrote {name} to {path}")
    
    return paths
