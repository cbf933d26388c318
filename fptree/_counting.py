"""First pass over the transactions: item supports and the insertion order."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from .typing import Item


def count_frequent_items(
    transactions: Iterable[Iterable[Item]],
    minimum_support_threshold: int,
) -> dict[Item, int]:
    """Count in how many transactions each item occurs.

    Items whose count is below ``minimum_support_threshold`` are dropped.
    Duplicates inside one transaction are counted once.
    """
    counts: Counter[Item] = Counter()
    for transaction in transactions:
        counts.update(set(transaction))
    return {item: count for item, count in counts.items() if count >= minimum_support_threshold}


def frequency_order(frequency_by_item: dict[Item, int]) -> list[Item]:
    """Items sorted by descending count, ties broken by ascending item."""
    return [
        item
        for item, _ in sorted(
            frequency_by_item.items(),
            key=lambda pair: (-pair[1], pair[0]),
        )
    ]
