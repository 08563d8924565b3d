"""Bar charts of per-strategy benchmark averages."""

from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from benchmark.metrics import DatasetResult


class PlotGenerator:
    def _set_style(self) -> None:
        style = 'seaborn-v0_8-whitegrid' if 'seaborn-v0_8-whitegrid' in plt.style.available else 'ggplot'
        plt.style.use(style)

    def _reset_style(self) -> None:
        plt.style.use('default')

    def _grouped_bars(
        self,
        results: list[DatasetResult],
        values: list[list[float]],
        ylabel: str,
        title: str,
        save_path: Path,
    ) -> None:
        save_path.parent.mkdir(parents=True, exist_ok=True)
        labels = [kind.label for kind in results[0].strategies]
        names = [r.name for r in results]
        width = 0.8 / len(labels)

        self._set_style()
        fig, ax = plt.subplots(figsize=(max(8, len(names) * 1.5), 6))
        for i, label in enumerate(labels):
            xs = [x + i * width for x in range(len(names))]
            ax.bar(xs, [row[i] for row in values], width=width, label=label)

        ax.set_xticks([x + 0.4 - width / 2 for x in range(len(names))])
        ax.set_xticklabels(names, rotation=30, ha='right')
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.legend(loc='best')
        ax.grid(True, axis='y', alpha=0.3)
        fig.tight_layout()
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        self._reset_style()

    def plot_average_bins(self, results: list[DatasetResult], save_path: str | Path) -> None:
        if not results:
            return
        self._grouped_bars(
            results,
            [r.average_bins() for r in results],
            'Average Bins',
            'Bins Used per Strategy',
            Path(save_path),
        )

    def plot_average_time(self, results: list[DatasetResult], save_path: str | Path) -> None:
        if not results:
            return
        self._grouped_bars(
            results,
            [r.average_times() for r in results],
            'Time per Trial (us)',
            'Running Time per Strategy',
            Path(save_path),
        )
