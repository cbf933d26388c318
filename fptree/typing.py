from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any, NamedTuple, Protocol, TypeVar


class SupportsItem(Hashable, Protocol):
    """Protocol for values usable as items.

    Items must hash consistently with ``==`` and be totally ordered by ``<``,
    so they can key the header table and be tie-broken by the frequency order.
    """

    def __lt__(self, other: Any, /) -> bool: ...


Item = TypeVar("Item", bound=SupportsItem)

#: An unordered collection of items; duplicates count once.
Transaction = Sequence[Any]


class TransformedPrefixPath(NamedTuple):
    """Items on the path above one occurrence node, with that node's frequency."""

    items: list[Any]
    weight: int


class Pattern(NamedTuple):
    """A frequent itemset and its absolute support count."""

    items: frozenset[Any]
    support: int

    def __repr__(self) -> str:
        return f"Pattern({sorted(self.items)!r}, {self.support})"
