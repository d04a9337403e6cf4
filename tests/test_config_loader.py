"""Tests for configuration loader."""

import pytest
from pydantic import ValidationError
from effort_pricing.config.loader import load_config


def test_load_config_valid(tmp_path):
    """Test loading a valid config file."""
    config_yaml = """
normal_distribution: erf
volatility_mode: common
common_volatility:
  history:
    planned: [10, 20, 15]
    actual: [12, 19, 18]
tasks:
  - name: Login page
    current_estimate: 50
    target_effort: 60
    time_to_deadline: 0.5
"""
    path = tmp_path / "config.yaml"
    path.write_text(config_yaml)
    
    config = load_config(path)
    assert config.normal_distribution == "erf"
    assert config.common_volatility.history.planned == [10, 20, 15]
    assert config.tasks[0].name == "Login page"
    assert config.tasks[0].current_estimate == 50.0


def test_load_config_invalid_schema(tmp_path):
    """Test that a schema violation raises ValidationError."""
    path = tmp_path / "config.yaml"
    path.write_text("tasks:\n  - name: Broken\n    current_estimate: -1\n")
    
    with pytest.raises(ValidationError):
        load_config(path)


def test_load_config_file_not_found():
    """Test that missing config file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config("nonexistent.yaml")


def test_load_config_requires_mapping(tmp_path):
    """Test that an empty or non-mapping file raises ValueError."""
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    listing = tmp_path / "list.yaml"
    listing.write_text("- name: Login page\n")
    
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(empty)
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(listing)
