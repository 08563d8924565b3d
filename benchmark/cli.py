"""CLI interface for running benchmarks."""

from __future__ import annotations

import logging
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from packing.base import OversizePolicy, PackingError
from packing.datasets import (
    DatasetNotFoundError,
    generate_uniform_item_set,
    generate_weibull_item_set,
)

from benchmark.config import BenchmarkConfig, load_config
from benchmark.harness import BenchmarkHarness
from benchmark.runner import BenchmarkRunner

app = typer.Typer(help="Greedy bin packing benchmark CLI")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve_config(config_path: Optional[str], overrides: dict) -> BenchmarkConfig:
    config = load_config(config_path) if config_path else BenchmarkConfig()
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return config
    data = config.to_dict()
    data.update(overrides)
    try:
        return BenchmarkConfig.from_dict(data)
    except ValidationError as e:
        raise ValueError(str(e)) from e


@app.command()
def run(
    config_path: Optional[str] = typer.Argument(None, help="Path to benchmark YAML config"),
    data_dir: Optional[str] = typer.Option(None, help="Directory of dataset files"),
    output_dir: Optional[str] = typer.Option(None, help="Directory for run artifacts"),
    run_id: Optional[str] = typer.Option(None, help="Run identifier"),
    trials: Optional[int] = typer.Option(None, help="Trials per strategy and dataset"),
    seed: Optional[int] = typer.Option(None, help="Random seed (default: wall clock)"),
    oversize_policy: Optional[OversizePolicy] = typer.Option(
        None, help="Handling of items heavier than the bin capacity"
    ),
    plots: Optional[bool] = typer.Option(None, "--plots/--no-plots", help="Render bar charts"),
    progress: Optional[bool] = typer.Option(None, "--progress/--no-progress", help="Show a progress bar"),
) -> None:
    """Benchmark every strategy on every dataset in the data directory."""
    try:
        config = _resolve_config(
            config_path,
            {
                "data_dir": data_dir,
                "output_dir": output_dir,
                "run_id": run_id,
                "trials": trials,
                "seed": seed,
                "oversize_policy": oversize_policy.value if oversize_policy else None,
                "plots": plots,
                "show_progress": progress,
            },
        )
    except FileNotFoundError as e:
        typer.secho(f"❌ Config file not found: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.secho(f"❌ Invalid config: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    try:
        summary = BenchmarkRunner(config).run()
    except DatasetNotFoundError as e:
        typer.secho(f"⚠️  {e}", fg=typer.colors.YELLOW)
        return
    except PackingError as e:
        typer.secho(f"❌ Benchmark failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.secho("✅ Benchmark completed!", fg=typer.colors.GREEN)
    typer.echo(f"   Datasets: {summary['datasets_completed']}")
    typer.echo(f"   Seed:     {summary['seed']}")
    typer.echo(f"   Results:  {summary['run_dir']}")


@app.command()
def synthetic(
    items: int = typer.Option(200, help="Number of items"),
    capacity: int = typer.Option(100, help="Bin capacity"),
    distribution: str = typer.Option("uniform", help="Weight distribution: uniform or weibull"),
    trials: int = typer.Option(100, help="Trials per strategy"),
    seed: int = typer.Option(42, help="Seed for item generation and randomized strategies"),
) -> None:
    """Benchmark a generated item set in memory and print the averages."""
    if items < 0 or capacity < 1 or trials < 1:
        typer.secho("❌ items must be >= 0, capacity and trials >= 1", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if distribution == "uniform":
        item_set = generate_uniform_item_set(items, capacity, seed=seed)
    elif distribution == "weibull":
        item_set = generate_weibull_item_set(items, capacity, seed=seed)
    else:
        typer.secho(f"❌ Unknown distribution: {distribution}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    result = BenchmarkHarness(trials=trials, seed=seed).run_item_set(item_set)

    typer.secho(
        f"\n📊 {item_set.name}: {item_set.num_items} items, "
        f"capacity {item_set.capacity}, lower bound {item_set.lower_bound}\n",
        fg=typer.colors.BLUE,
    )
    typer.echo(f"   {'Strategy':<12} {'Bins':>10} {'Time (us)':>12}")
    for strategy_result in result.results:
        typer.echo(
            f"   {strategy_result.strategy.label:<12} "
            f"{strategy_result.average_bins:>10.2f} "
            f"{strategy_result.average_time_us:>12.2f}"
        )


@app.command()
def show_config(
    config_path: Optional[str] = typer.Argument(None, help="Path to benchmark YAML config"),
) -> None:
    """Print the effective configuration as YAML."""
    try:
        config = load_config(config_path) if config_path else BenchmarkConfig()
    except (FileNotFoundError, ValueError) as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    typer.echo(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))


if __name__ == "__main__":
    app()
