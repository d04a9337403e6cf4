"""Batch task files.

A batch file is a YAML mapping with the estimation settings and a `tasks`
list; see config.yaml at the repository root for a complete example.
"""

from pathlib import Path

import yaml

from effort_pricing.config.schema import EstimationConfig


def load_config(config_path: str | Path) -> EstimationConfig:
    """Read a YAML batch file into an EstimationConfig.

    Args:
        config_path: Path to the batch file

    Returns:
        EstimationConfig with tasks and volatility sources validated

    Raises:
        FileNotFoundError: If the batch file doesn't exist
        ValueError: If the file does not contain a YAML mapping
        yaml.YAMLError: If YAML is malformed
        pydantic.ValidationError: If tasks or settings are invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Batch file not found: {config_path}")

    with open(config_path, "r") as f:
        raw_config = yaml.safe_load(f)

    if not isinstance(raw_config, dict):
        raise ValueError(
            f"Batch file {config_path} must contain a mapping with a 'tasks' list"
        )

    return EstimationConfig.model_validate(raw_config)
