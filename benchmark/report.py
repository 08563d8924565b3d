"""Typeset result tables and a Markdown summary report."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import TextIO

import yaml

from packing.datasets import display_name

from benchmark.metrics import DatasetResult


def format_row(name: str, values: Sequence[float]) -> str:
    """One LaTeX tabular row: ``name & v1 & ... & vk \\\\``."""
    cells = "".join(f"& {value:.2f} " for value in values)
    return f"{display_name(name)} {cells}\\\\"


class TableWriter:
    """Streams one bin-count row and one timing row per dataset."""

    def __init__(self, result_file: TextIO, time_file: TextIO):
        self.result_file = result_file
        self.time_file = time_file

    def write(self, result: DatasetResult) -> None:
        name, bins, times = result.as_row()
        self.result_file.write(format_row(name, bins) + "\n")
        self.time_file.write(format_row(name, times) + "\n")
        self.result_file.flush()
        self.time_file.flush()


class ReportGenerator:
    def __init__(self, results: list[DatasetResult], config: dict):
        self.results = results
        self.config = config

    def _table(self, values_of) -> str:
        if not self.results:
            return "_No datasets._"
        labels = [kind.label for kind in self.results[0].strategies]
        header = "| Dataset | n | LB | " + " | ".join(labels) + " |"
        divider = "|" + "---|" * (len(labels) + 3)
        rows = [header, divider]
        for result in self.results:
            cells = " | ".join(f"{v:.2f}" for v in values_of(result))
            rows.append(f"| {result.name} | {result.num_items} | {result.lower_bound} | {cells} |")
        return "\n".join(rows)

    def _winners(self) -> list[str]:
        lines = []
        for result in self.results:
            if not result.results:
                continue
            best = min(result.results, key=lambda r: r.average_bins)
            lines.append(f"- **{result.name}:** {best.strategy.label} ({best.average_bins:.2f} bins)")
        return lines

    def generate_markdown(self, output_path: Path) -> None:
        output_path = Path(output_path)

        run_id = self.config.get("run_id", "N/A")
        date = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        winners = "\n".join(self._winners()) or "_No datasets._"

        md_content = f"""# Bin Packing Benchmark Report

## Run Summary
- **Run ID:** {run_id}
- **Date:** {date}
- **Datasets:** {len(self.results)}
- **Trials per strategy:** {self.config.get("trials", "N/A")}
- **Seed:** {self.config.get("seed", "N/A")}

## Average Bins per Trial
{self._table(lambda r: r.average_bins())}

## Average Time per Trial (us)
{self._table(lambda r: r.average_times())}

## Fewest Bins
{winners}

## Configuration
```yaml
{yaml.dump(self.config, default_flow_style=False, sort_keys=False)}
```
"""
        output_path.write_text(md_content, encoding="utf-8")
