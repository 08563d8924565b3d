"""Base packing interfaces and shared types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class PackingError(Exception):
    """Base class for packing errors."""


class InvalidItemError(PackingError):
    """An item weight is not packable under the active oversize policy."""


class OversizePolicy(str, Enum):
    """What to do with an item heavier than the bin capacity.

    ``ALLOW`` keeps the reference behaviour: the item opens a bin whose
    remaining capacity goes negative.
    """

    ALLOW = "allow"
    REJECT = "reject"
    CLAMP = "clamp"


def apply_oversize_policy(
    weights: Iterable[int],
    capacity: int,
    policy: OversizePolicy = OversizePolicy.ALLOW,
) -> tuple[int, ...]:
    policy = OversizePolicy(policy)
    result: list[int] = []
    for index, weight in enumerate(weights):
        if weight > capacity:
            if policy is OversizePolicy.REJECT:
                raise InvalidItemError(
                    f"Item {index} has weight {weight} > capacity {capacity}"
                )
            if policy is OversizePolicy.CLAMP:
                weight = capacity
        result.append(weight)
    return tuple(result)


@dataclass(frozen=True)
class ItemSet:
    """An ordered item sequence plus the shared bin capacity."""

    name: str
    capacity: int
    weights: tuple[int, ...]

    @classmethod
    def build(
        cls,
        name: str,
        capacity: int,
        weights: Iterable[int],
        oversize_policy: OversizePolicy = OversizePolicy.ALLOW,
    ) -> "ItemSet":
        return cls(
            name=name,
            capacity=capacity,
            weights=apply_oversize_policy(weights, capacity, oversize_policy),
        )

    @property
    def num_items(self) -> int:
        return len(self.weights)

    @property
    def total_size(self) -> int:
        return sum(self.weights)

    @property
    def lower_bound(self) -> int:
        """L1 lower bound: ceil(sum of items / capacity)."""
        return (self.total_size + self.capacity - 1) // self.capacity

    def working_copy(self) -> list[int]:
        return list(self.weights)

    def __repr__(self) -> str:
        return (
            f"ItemSet(name='{self.name}', "
            f"capacity={self.capacity}, items={self.num_items})"
        )


class BinLedger:
    """Remaining capacity of every open bin, in creation order."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.remaining: list[int] = []

    def __len__(self) -> int:
        return len(self.remaining)

    def open(self, weight: int) -> int:
        """Open a new bin holding ``weight`` and return its index."""
        self.remaining.append(self.capacity - weight)
        return len(self.remaining) - 1

    def place(self, index: int, weight: int) -> None:
        if weight > self.remaining[index]:
            raise ValueError("Item does not fit in bin")
        self.remaining[index] -= weight


class PackingStrategy(ABC):
    """Greedy packing policy driven through ``init`` then ``solve``.

    Every ``init`` takes a private copy of the item weights, so strategies
    may reorder their copy without touching the caller's item set.
    """

    def __init__(self) -> None:
        self.capacity: int = 0
        self.weights: list[int] | None = None
        self.ledger: BinLedger | None = None

    def init(self, item_set: ItemSet) -> None:
        self.capacity = item_set.capacity
        self.weights = item_set.working_copy()
        self.ledger = None

    def solve(self) -> int:
        if self.weights is None:
            raise RuntimeError(f"{type(self).__name__}.solve() called before init()")
        self.ledger = BinLedger(self.capacity)
        self._pack(self.weights, self.ledger)
        return len(self.ledger)

    @abstractmethod
    def _pack(self, weights: list[int], ledger: BinLedger) -> None:
        """Assign every weight to a bin in ``ledger``."""
