"""Command-line interface for the effort forecaster.

Orchestrates config loading, volatility resolution, batch estimation and
artifact generation, or runs an interactive console session.
"""

import argparse
import logging

from effort_pricing.config.loader import load_config
from effort_pricing.data.sources.config_source import ConfigTaskProvider
from effort_pricing.engine.estimation import run_estimation
from effort_pricing.engine.forecaster import EffortForecaster
from effort_pricing.interactive import ConsoleSession
from effort_pricing.model import NORMAL_DISTRIBUTIONS, get_normal_distribution
from effort_pricing.report.artifacts import write_artifacts
from effort_pricing.report.text import render_risk_analysis, render_summary_table

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Forecast task effort with the Black-Scholes model",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    
    parser.add_argument(
        "--config",
        type=str,
        default="config.yaml",
        help="Path to configuration YAML file",
    )
    parser.add_argument(
        "--outdir",
        type=str,
        default="out",
        help="Output directory for artifacts",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Enter tasks at the console instead of reading a config file",
    )
    parser.add_argument(
        "--distribution",
        choices=sorted(NORMAL_DISTRIBUTIONS),
        help="Normal CDF approximation (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def run_batch(config_path: str, outdir: str, distribution: str | None = None):
    """Estimate every task in a config file and write artifacts.
    
    Args:
        config_path: Path to YAML configuration
        outdir: Directory for results.csv, summary.json and report.md
        distribution: Optional CDF approximation overriding the config
        
    Returns:
        EstimationResult of the run
    """
    logger.info(f"Loading configuration from {config_path}")
    config = load_config(config_path)
    
    distribution = distribution or config.normal_distribution
    logger.info(f"Using normal distribution: {distribution}")
    forecaster = EffortForecaster(get_normal_distribution(distribution))
    
    tasks = ConfigTaskProvider(config).get_tasks()
    logger.info(f"Estimating {len(tasks)} tasks (volatility mode: {config.volatility_mode})")
    for task in tasks:
        logger.info(f"  - {task.name}: sigma={task.volatility:.4f}")
    
    result = run_estimation(tasks, forecaster)
    
    print(render_summary_table(result.tasks))
    print()
    print(render_risk_analysis(result.tasks))
    
    logger.info(f"Writing artifacts to {outdir}/")
    paths = write_artifacts(result, outdir)
    
    logger.info("Estimation complete")
    for name, path in paths.items():
        logger.info(f"  - {name.capitalize()}: {path}")
    
    return result


def main(argv: list[str] | None = None):
    """Run the effort forecaster CLI."""
    args = build_parser().parse_args(argv)
    
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    
    if args.interactive:
        forecaster = EffortForecaster(get_normal_distribution(args.distribution or "hart"))
        ConsoleSession(forecaster=forecaster).run()
        return
    
    run_batch(args.config, args.outdir, args.distribution)


if __name__ == "__main__":
    main()
