"""Benchmark runner orchestrating datasets, harness and artifacts."""

from __future__ import annotations

import logging
from typing import Any

from tqdm import tqdm

from packing.base import PackingError
from packing.datasets import DatasetNotFoundError, discover_datasets, load_dataset

from benchmark.artifacts import ArtifactManager
from benchmark.config import BenchmarkConfig
from benchmark.harness import BenchmarkHarness, Clock, wall_clock_seed
from benchmark.metrics import DatasetResult, ResultsCollector
from benchmark.plotting import PlotGenerator
from benchmark.report import ReportGenerator, TableWriter

logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Runs the configured strategies over every dataset in ``data_dir``.

    Datasets are processed one at a time; each one becomes a row in
    ``result.txt`` and ``time.txt`` as soon as it finishes.
    """

    def __init__(self, config: BenchmarkConfig, clock: Clock | None = None):
        if config.seed is None:
            seed = wall_clock_seed()
            logger.info("No seed configured, using wall-clock seed %d", seed)
            config = config.model_copy(update={"seed": seed})
        self.config = config
        self.clock = clock
        self.collector = ResultsCollector()
        self.artifacts: ArtifactManager | None = None

    def _build_harness(self) -> BenchmarkHarness:
        kwargs: dict[str, Any] = {}
        if self.clock is not None:
            kwargs["clock"] = self.clock
        return BenchmarkHarness(
            trials=self.config.trials,
            strategies=self.config.strategies,
            seed=self.config.seed,
            **kwargs,
        )

    def run(self) -> dict[str, Any]:
        """Run the benchmark and write all artifacts.

        Raises:
            DatasetNotFoundError: If the data directory is missing or empty.
                Nothing is written in that case.
            DatasetError: If a dataset file is malformed. Results of the
                datasets completed before it are still exported.
        """
        paths = discover_datasets(self.config.data_dir)
        if not paths:
            raise DatasetNotFoundError(f"No datasets in '{self.config.data_dir}': no input available")

        self.artifacts = ArtifactManager(self.config)
        self.artifacts.snapshot_config()
        harness = self._build_harness()

        logger.info(
            "Benchmarking %d dataset(s) x %d strateg(ies), %d trials each (seed=%s)",
            len(paths),
            len(harness.strategies),
            self.config.trials,
            self.config.seed,
        )

        with open(self.artifacts.result_table_path, "w", encoding="utf-8") as fres, \
                open(self.artifacts.time_table_path, "w", encoding="utf-8") as ftime:
            writer = TableWriter(fres, ftime)
            pbar = tqdm(paths, desc="Datasets", unit="dataset", disable=not self.config.show_progress)
            try:
                for path in pbar:
                    pbar.set_postfix_str(path.name)
                    item_set = load_dataset(path, self.config.oversize_policy)
                    result = harness.run_item_set(item_set)
                    writer.write(result)
                    self.collector.record(result)
            except PackingError as e:
                logger.error(
                    "Stopped after %d dataset(s): %s",
                    len(self.collector.datasets),
                    e,
                )
                self._export(self.collector.datasets)
                raise

        self._export(self.collector.datasets)
        return self.artifacts.get_summary()

    def _export(self, results: list[DatasetResult]) -> None:
        assert self.artifacts is not None
        self.collector.export_jsonl(self.artifacts.results_jsonl_path)
        self.collector.export_csv(self.artifacts.results_csv_path)

        ReportGenerator(results, self.config.to_dict()).generate_markdown(self.artifacts.report_path)

        if self.config.plots:
            plotter = PlotGenerator()
            plotter.plot_average_bins(results, self.artifacts.plots_dir / "average_bins.png")
            plotter.plot_average_time(results, self.artifacts.plots_dir / "average_time.png")
