"""
Packing Module

Greedy one-dimensional bin packing heuristics.

This module provides:
- Item sets and the per-solve bin capacity ledger
- First/Next/Best/Worst-Fit strategies
- Randomized Shuffled-First-Fit and Sorted-Random-Fit strategies
- Dataset directory discovery and file parsing
- Synthetic uniform and Weibull item sets
"""

__version__ = "0.1.0"

from .base import (
    BinLedger,
    InvalidItemError,
    ItemSet,
    OversizePolicy,
    PackingError,
    PackingStrategy,
)
from .datasets import (
    DatasetError,
    DatasetNotFoundError,
    discover_datasets,
    display_name,
    generate_uniform_item_set,
    generate_weibull_item_set,
    load_dataset,
    parse_dataset,
)
from .strategies import (
    DEFAULT_STRATEGY_ORDER,
    StrategyKind,
    create_strategy,
    is_randomized,
)

__all__ = [
    "BinLedger",
    "InvalidItemError",
    "ItemSet",
    "OversizePolicy",
    "PackingError",
    "PackingStrategy",
    "DatasetError",
    "DatasetNotFoundError",
    "discover_datasets",
    "display_name",
    "generate_uniform_item_set",
    "generate_weibull_item_set",
    "load_dataset",
    "parse_dataset",
    "DEFAULT_STRATEGY_ORDER",
    "StrategyKind",
    "create_strategy",
    "is_randomized",
]
