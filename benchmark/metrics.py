"""Per-dataset benchmark results and their export."""

from __future__ import annotations

import csv
import json
from dataclasses import dataclass, field
from pathlib import Path

from packing.strategies import StrategyKind

MICROSECONDS = 1_000_000


@dataclass(frozen=True)
class StrategyResult:
    strategy: StrategyKind
    trials: int
    total_bins: int
    elapsed_s: float

    @property
    def average_bins(self) -> float:
        return self.total_bins / self.trials

    @property
    def average_time_us(self) -> float:
        """Mean wall time per trial (init + solve) in microseconds."""
        return self.elapsed_s * MICROSECONDS / self.trials

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy.value,
            "trials": self.trials,
            "total_bins": self.total_bins,
            "elapsed_s": self.elapsed_s,
            "average_bins": self.average_bins,
            "average_time_us": self.average_time_us,
        }


@dataclass
class DatasetResult:
    name: str
    num_items: int
    capacity: int
    lower_bound: int
    results: list[StrategyResult] = field(default_factory=list)

    @property
    def strategies(self) -> list[StrategyKind]:
        return [r.strategy for r in self.results]

    def average_bins(self) -> list[float]:
        return [r.average_bins for r in self.results]

    def average_times(self) -> list[float]:
        return [r.average_time_us for r in self.results]

    def as_row(self) -> tuple[str, list[float], list[float]]:
        return self.name, self.average_bins(), self.average_times()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "num_items": self.num_items,
            "capacity": self.capacity,
            "lower_bound": self.lower_bound,
            "results": [r.to_dict() for r in self.results],
        }


class ResultsCollector:
    def __init__(self):
        self.datasets: list[DatasetResult] = []

    def record(self, result: DatasetResult) -> None:
        self.datasets.append(result)

    def export_jsonl(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            for result in self.datasets:
                json.dump(result.to_dict(), f)
                f.write('\n')

    def export_csv(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self.datasets:
            return

        fieldnames = [
            'dataset', 'num_items', 'capacity', 'lower_bound', 'strategy',
            'trials', 'average_bins', 'average_time_us'
        ]

        with open(path, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for result in self.datasets:
                for strategy_result in result.results:
                    writer.writerow({
                        'dataset': result.name,
                        'num_items': result.num_items,
                        'capacity': result.capacity,
                        'lower_bound': result.lower_bound,
                        'strategy': strategy_result.strategy.value,
                        'trials': strategy_result.trials,
                        'average_bins': strategy_result.average_bins,
                        'average_time_us': strategy_result.average_time_us,
                    })
