"""Artifact management for benchmark runs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from benchmark.config import BenchmarkConfig, save_config


class ArtifactManager:
    """Manages run outputs: config snapshot, tables, results and plots."""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.run_dir = Path(config.output_dir) / config.run_id
        self.plots_dir = self.run_dir / "plots"

        self._create_directory_structure()

    def _create_directory_structure(self) -> None:
        self.run_dir.mkdir(parents=True, exist_ok=True)
        if self.config.plots:
            self.plots_dir.mkdir(exist_ok=True)

    @property
    def config_path(self) -> Path:
        return self.run_dir / "config.yaml"

    @property
    def result_table_path(self) -> Path:
        return self.run_dir / "result.txt"

    @property
    def time_table_path(self) -> Path:
        return self.run_dir / "time.txt"

    @property
    def results_jsonl_path(self) -> Path:
        return self.run_dir / "results.jsonl"

    @property
    def results_csv_path(self) -> Path:
        return self.run_dir / "results.csv"

    @property
    def report_path(self) -> Path:
        return self.run_dir / "report.md"

    def snapshot_config(self) -> None:
        """Save a snapshot of the configuration for reproducibility."""
        save_config(self.config, self.config_path)

    def load_results(self) -> list[dict[str, Any]]:
        """Load per-dataset results from the JSONL file."""
        if not self.results_jsonl_path.exists():
            return []

        results = []
        with open(self.results_jsonl_path, "r") as f:
            for line in f:
                if line.strip():
                    results.append(json.loads(line))

        return results

    def get_summary(self) -> dict[str, Any]:
        results = self.load_results()

        if not results:
            return {
                "run_id": self.config.run_id,
                "status": "no_data",
                "datasets_completed": 0,
            }

        return {
            "run_id": self.config.run_id,
            "status": "completed",
            "datasets_completed": len(results),
            "seed": self.config.seed,
            "run_dir": str(self.run_dir),
        }
