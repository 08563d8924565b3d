"""Benchmark configuration with YAML support."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import yaml
from pydantic import Field, field_validator

from benchmark.schemas import BaseSchema
from packing.base import OversizePolicy
from packing.strategies import DEFAULT_STRATEGY_ORDER, StrategyKind

DEFAULT_TRIALS = 1000
DEFAULT_DATA_DIR = "Data"
DEFAULT_OUTPUT_DIR = "results"


def default_run_id() -> str:
    return f"bench_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


class BenchmarkConfig(BaseSchema):
    """Configuration for one benchmark run."""

    run_id: str = Field(default_factory=default_run_id)

    # Inputs
    data_dir: str = DEFAULT_DATA_DIR
    oversize_policy: OversizePolicy = OversizePolicy.ALLOW

    # Harness
    trials: int = Field(default=DEFAULT_TRIALS, ge=1)
    strategies: list[StrategyKind] = Field(
        default_factory=lambda: list(DEFAULT_STRATEGY_ORDER)
    )
    seed: int | None = None  # None = derive from the wall clock

    # Outputs
    output_dir: str = DEFAULT_OUTPUT_DIR
    show_progress: bool = True
    plots: bool = True

    @field_validator("strategies")
    @classmethod
    def strategies_unique(cls, value: list[StrategyKind]) -> list[StrategyKind]:
        if not value:
            raise ValueError("at least one strategy is required")
        if len(set(value)) != len(value):
            raise ValueError("strategies must not repeat")
        return value


def load_config(yaml_path: str | Path) -> BenchmarkConfig:
    """Load benchmark configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        BenchmarkConfig instance

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is invalid or has invalid fields
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

    if not data:
        raise ValueError(f"Empty or invalid YAML file: {yaml_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {yaml_path}")

    try:
        return BenchmarkConfig.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {yaml_path}: {e}") from e


def save_config(config: BenchmarkConfig, yaml_path: str | Path) -> None:
    """Save benchmark configuration to YAML file for reproducibility."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.to_dict()

    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
