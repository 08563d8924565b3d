"""Dataset loading and synthetic item set generation.

Dataset file format (one instance per file, whitespace separated):
- Number of items (n)
- Bin capacity (C)
- n item weights

The benchmark scans a directory of such files; every regular file is one
dataset and the file name is the dataset name.
"""

from __future__ import annotations

import logging
import math
import random
from pathlib import Path

from .base import ItemSet, OversizePolicy, PackingError

logger = logging.getLogger(__name__)


class DatasetError(PackingError):
    """A dataset file is malformed."""


class DatasetNotFoundError(PackingError):
    """The dataset directory does not exist or holds no datasets."""


def discover_datasets(directory: str | Path) -> list[Path]:
    """List dataset files in ``directory`` sorted by file name."""
    directory = Path(directory)
    if not directory.is_dir():
        raise DatasetNotFoundError(f"'{directory}' folder not found")

    paths = sorted(p for p in directory.iterdir() if p.is_file())
    logger.debug("Discovered %d dataset(s) in %s", len(paths), directory)
    return paths


def _parse_int(token: str, field: str, path: Path) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise DatasetError(f"{path.name}: {field} is not an integer: {token!r}") from e


def parse_dataset(
    text: str,
    name: str,
    oversize_policy: OversizePolicy = OversizePolicy.ALLOW,
    path: Path | None = None,
) -> ItemSet:
    """Parse ``n C w1 ... wn`` into an :class:`ItemSet`."""
    path = path or Path(name)
    tokens = text.split()
    if len(tokens) < 2:
        raise DatasetError(f"{path.name}: expected item count and capacity")

    num_items = _parse_int(tokens[0], "item count", path)
    capacity = _parse_int(tokens[1], "capacity", path)
    if num_items < 0:
        raise DatasetError(f"{path.name}: negative item count {num_items}")
    if capacity <= 0:
        raise DatasetError(f"{path.name}: capacity must be positive, got {capacity}")

    weights = [_parse_int(tok, "weight", path) for tok in tokens[2:]]
    if len(weights) != num_items:
        raise DatasetError(
            f"{path.name}: declared {num_items} items but found {len(weights)} weights"
        )
    for index, weight in enumerate(weights):
        if weight <= 0:
            raise DatasetError(f"{path.name}: weight {index} is not positive: {weight}")

    return ItemSet.build(name, capacity, weights, oversize_policy)


def load_dataset(
    path: str | Path,
    oversize_policy: OversizePolicy = OversizePolicy.ALLOW,
) -> ItemSet:
    """Load a single dataset file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise DatasetError(f"{path.name}: not a text file") from e
    item_set = parse_dataset(text, path.name, oversize_policy, path=path)
    logger.debug("Loaded %r", item_set)
    return item_set


def display_name(name: str) -> str:
    """Dataset name for typeset tables: cut at the first '.', escape '_'."""
    stem = name.split(".", 1)[0]
    return stem.replace("_", "\\_")


# ============== Synthetic item sets ==============

def generate_uniform_item_set(
    num_items: int,
    capacity: int = 100,
    low: int = 1,
    high: int | None = None,
    seed: int = 42,
) -> ItemSet:
    """Item set with weights drawn uniformly from ``[low, high]``."""
    high = capacity if high is None else high
    rng = random.Random(seed)
    weights = [max(1, min(capacity, rng.randint(low, high))) for _ in range(num_items)]
    return ItemSet(
        name=f"uniform_n{num_items}_s{seed}",
        capacity=capacity,
        weights=tuple(weights),
    )


def generate_weibull_item_set(
    num_items: int,
    capacity: int = 100,
    shape: float = 2.0,
    scale: float = 30.0,
    seed: int = 42,
) -> ItemSet:
    """Item set with Weibull-distributed weights.

    Weibull sizes model real-world items, which tend to have more small
    items than large ones.

    Args:
        num_items: Number of items to generate.
        capacity: Bin capacity.
        shape: Weibull shape parameter (k).
        scale: Weibull scale parameter (lambda).
        seed: Random seed for reproducibility.
    """
    rng = random.Random(seed)
    weights: list[int] = []
    for _ in range(num_items):
        u = rng.random()
        # Inverse transform: x = scale * (-ln(1-u))^(1/shape)
        value = scale * ((-math.log(1 - u)) ** (1 / shape))
        weights.append(max(1, min(capacity, int(value))))

    return ItemSet(
        name=f"weibull_n{num_items}_s{seed}",
        capacity=capacity,
        weights=tuple(weights),
    )
