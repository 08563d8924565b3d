import itertools

import pytest

from benchmark.harness import BenchmarkHarness
from packing.base import BinLedger, ItemSet, PackingStrategy
from packing.datasets import generate_uniform_item_set
from packing.strategies import DEFAULT_STRATEGY_ORDER, StrategyKind


def fake_clock():
    ticks = itertools.count()
    return lambda: float(next(ticks))


class ManualClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class SlowInit(PackingStrategy):
    """Spends half a clock second in every init and packs nothing."""

    def __init__(self, clock: ManualClock) -> None:
        super().__init__()
        self.clock = clock

    def init(self, item_set):
        super().init(item_set)
        self.clock.now += 0.5

    def _pack(self, weights: list[int], ledger: BinLedger) -> None:
        pass


def test_averages_over_trials():
    item_set = ItemSet(name="ref", capacity=5, weights=(2, 2, 3, 4))
    harness = BenchmarkHarness(trials=4, seed=1, clock=fake_clock())
    result = harness.run_item_set(item_set)

    assert result.strategies == list(DEFAULT_STRATEGY_ORDER)
    assert result.lower_bound == 3
    for strategy_result in result.results:
        assert strategy_result.total_bins == 12
        assert strategy_result.average_bins == 3.0
        # one fake second per strategy, spread over 4 trials
        assert strategy_result.elapsed_s == 1.0
        assert strategy_result.average_time_us == 250_000.0


def test_as_row_matches_strategy_order():
    item_set = ItemSet(name="one", capacity=3, weights=(3,))
    harness = BenchmarkHarness(
        trials=2,
        strategies=["worst_fit", "first_fit"],
        seed=0,
        clock=fake_clock(),
    )
    name, bins, times = harness.run_item_set(item_set).as_row()
    assert name == "one"
    assert bins == [1.0, 1.0]
    assert times == [500_000.0, 500_000.0]
    assert [k for k, _ in harness.strategies] == [StrategyKind.WORST_FIT, StrategyKind.FIRST_FIT]


def test_same_seed_reproduces_randomized_averages():
    item_set = generate_uniform_item_set(50, capacity=100, seed=12)
    a = BenchmarkHarness(trials=20, seed=99).run_item_set(item_set)
    b = BenchmarkHarness(trials=20, seed=99).run_item_set(item_set)
    assert a.average_bins() == b.average_bins()


def test_strategies_reused_across_item_sets():
    harness = BenchmarkHarness(trials=3, seed=5)
    first = harness.run_item_set(generate_uniform_item_set(40, seed=1))
    second = harness.run_item_set(ItemSet(name="tiny", capacity=10, weights=(10,)))
    assert len(first.results) == 6
    assert second.average_bins() == [1.0] * 6


def test_wall_clock_seed_when_unset():
    harness = BenchmarkHarness(trials=1)
    assert isinstance(harness.seed, int)


def test_invalid_trials():
    with pytest.raises(ValueError):
        BenchmarkHarness(trials=0)


def test_init_cost_is_timed():
    clock = ManualClock()
    harness = BenchmarkHarness(trials=4, seed=1, clock=clock)
    harness.strategies = [(StrategyKind.FIRST_FIT, SlowInit(clock))]
    result = harness.run_item_set(ItemSet(name="ref", capacity=5, weights=(2, 3)))

    (strategy_result,) = result.results
    assert strategy_result.total_bins == 0
    assert strategy_result.elapsed_s == 2.0
    assert strategy_result.average_time_us == 500_000.0
