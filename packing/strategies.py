"""Greedy bin packing strategies.

The six strategies form a closed set tagged by :class:`StrategyKind`:

- first-fit: first open bin (creation order) that fits
- next-fit: circular scan starting at the current bin
- best-fit: fitting bin with the least remaining capacity
- worst-fit: bin with the most remaining capacity
- shuffled first-fit: random permutation, then first-fit
- sorted random-fit: descending order, uniform choice among fitting bins

Next-fit here is NOT the textbook single-bin rule. When the current bin
cannot take the item, the scan wraps around all open bins before a new bin
is opened.
"""

from __future__ import annotations

import random
from enum import Enum

from .base import BinLedger, ItemSet, PackingStrategy


class StrategyKind(str, Enum):
    FIRST_FIT = "first_fit"
    NEXT_FIT = "next_fit"
    BEST_FIT = "best_fit"
    WORST_FIT = "worst_fit"
    SHUFFLED_FIRST_FIT = "shuffled_first_fit"
    SORTED_RANDOM_FIT = "sorted_random_fit"

    @property
    def label(self) -> str:
        return STRATEGY_LABELS[self]


STRATEGY_LABELS: dict[StrategyKind, str] = {
    StrategyKind.FIRST_FIT: "FF",
    StrategyKind.NEXT_FIT: "NF",
    StrategyKind.BEST_FIT: "BF",
    StrategyKind.WORST_FIT: "WF",
    StrategyKind.SHUFFLED_FIRST_FIT: "Shuffled-FF",
    StrategyKind.SORTED_RANDOM_FIT: "Sorted-RF",
}

DEFAULT_STRATEGY_ORDER: tuple[StrategyKind, ...] = (
    StrategyKind.FIRST_FIT,
    StrategyKind.NEXT_FIT,
    StrategyKind.BEST_FIT,
    StrategyKind.WORST_FIT,
    StrategyKind.SHUFFLED_FIRST_FIT,
    StrategyKind.SORTED_RANDOM_FIT,
)


class FirstFit(PackingStrategy):
    def _pack(self, weights: list[int], ledger: BinLedger) -> None:
        remaining = ledger.remaining
        for weight in weights:
            for j, space in enumerate(remaining):
                if weight <= space:
                    ledger.place(j, weight)
                    break
            else:
                ledger.open(weight)


class NextFit(PackingStrategy):
    """Circular next-fit: wraps over all open bins before opening a new one."""

    def _pack(self, weights: list[int], ledger: BinLedger) -> None:
        if not weights:
            return
        remaining = ledger.remaining
        cur = ledger.open(weights[0])
        for weight in weights[1:]:
            m = len(remaining)
            for offset in range(m):
                j = (cur + offset) % m
                if weight <= remaining[j]:
                    ledger.place(j, weight)
                    cur = j
                    break
            else:
                cur = ledger.open(weight)


class BestFit(PackingStrategy):
    def _pack(self, weights: list[int], ledger: BinLedger) -> None:
        remaining = ledger.remaining
        for weight in weights:
            best_j: int | None = None
            for j, space in enumerate(remaining):
                # strict < keeps the earliest bin on ties
                if weight <= space and (best_j is None or space < remaining[best_j]):
                    best_j = j
            if best_j is None:
                ledger.open(weight)
            else:
                ledger.place(best_j, weight)


class WorstFit(PackingStrategy):
    """Always targets the bin with the largest remaining capacity."""

    def _pack(self, weights: list[int], ledger: BinLedger) -> None:
        remaining = ledger.remaining
        for weight in weights:
            max_space, max_j = 0, -1
            for j, space in enumerate(remaining):
                if max_space < space:
                    max_space, max_j = space, j
            if max_j == -1 or max_space < weight:
                ledger.open(weight)
            else:
                ledger.place(max_j, weight)


class ShuffledFirstFit(FirstFit):
    """First-fit over a fresh random permutation drawn on every ``init``."""

    def __init__(self, rng: random.Random) -> None:
        super().__init__()
        self.rng = rng

    def init(self, item_set: ItemSet) -> None:
        super().init(item_set)
        assert self.weights is not None
        self.rng.shuffle(self.weights)


class SortedRandomFit(PackingStrategy):
    """Descending order, then a uniform pick among all bins that fit."""

    def __init__(self, rng: random.Random) -> None:
        super().__init__()
        self.rng = rng

    def init(self, item_set: ItemSet) -> None:
        super().init(item_set)
        assert self.weights is not None
        self.weights.sort(reverse=True)

    def _pack(self, weights: list[int], ledger: BinLedger) -> None:
        remaining = ledger.remaining
        for weight in weights:
            fitting = [j for j, space in enumerate(remaining) if weight <= space]
            if not fitting:
                ledger.open(weight)
            else:
                ledger.place(fitting[self.rng.randrange(len(fitting))], weight)


_DETERMINISTIC: dict[StrategyKind, type[PackingStrategy]] = {
    StrategyKind.FIRST_FIT: FirstFit,
    StrategyKind.NEXT_FIT: NextFit,
    StrategyKind.BEST_FIT: BestFit,
    StrategyKind.WORST_FIT: WorstFit,
}

_RANDOMIZED = {
    StrategyKind.SHUFFLED_FIRST_FIT: ShuffledFirstFit,
    StrategyKind.SORTED_RANDOM_FIT: SortedRandomFit,
}


def is_randomized(kind: StrategyKind | str) -> bool:
    return StrategyKind(kind) in _RANDOMIZED


def create_strategy(
    kind: StrategyKind | str,
    rng: random.Random | None = None,
) -> PackingStrategy:
    """Build a strategy instance for ``kind``.

    Randomized strategies require ``rng``; it is ignored by the others.
    """

    kind = StrategyKind(kind)
    if kind in _DETERMINISTIC:
        return _DETERMINISTIC[kind]()
    if rng is None:
        raise ValueError(f"Strategy '{kind.value}' needs a random source")
    return _RANDOMIZED[kind](rng)
