"""FP-tree: a prefix tree of frequency-ordered transactions plus a header table."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from ._counting import count_frequent_items, frequency_order
from .typing import Transaction

logger = logging.getLogger(__name__)


class FPNode:
    """One node of an :class:`FPTree`.

    ``children`` maps an item to the child node holding it, so a node never
    has two children with the same item.  The root has ``item=None`` and no
    parent.
    """

    __slots__ = ("item", "frequency", "parent", "children")

    def __init__(self, item: Any, parent: FPNode | None) -> None:
        self.item = item
        self.frequency = 1
        self.parent = parent
        self.children: dict[Any, FPNode] = {}

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        if self.is_root:
            return f"FPNode(<root>, children={len(self.children)})"
        return f"FPNode({self.item!r}, frequency={self.frequency}, children={len(self.children)})"


class FPTree:
    """FP-tree built in one shot from a list of transactions.

    Parameters
    ----------
    transactions:
        Sequence of transactions.  Each transaction is an unordered
        collection of hashable, mutually comparable items.
    minimum_support_threshold:
        Absolute count an item needs to enter the tree.  Values ``<= 1``
        keep every item.

    Attributes
    ----------
    root:
        Itemless sentinel node.
    header_table:
        Maps each frequent item to the list of its nodes, in the order they
        were created.  The list plays the role of the node-link chain.
    minimum_support_threshold:
        The threshold the tree was built with; conditional trees reuse it.
    """

    def __init__(
        self,
        transactions: Sequence[Transaction],
        minimum_support_threshold: int,
    ) -> None:
        self.root = FPNode(None, None)
        self.header_table: dict[Any, list[FPNode]] = {}
        self.minimum_support_threshold = minimum_support_threshold

        frequency_by_item = count_frequent_items(transactions, minimum_support_threshold)
        rank = {item: i for i, item in enumerate(frequency_order(frequency_by_item))}

        for transaction in transactions:
            ordered = sorted({item for item in transaction if item in rank}, key=rank.__getitem__)
            self._insert(ordered)

        logger.debug(
            "Built FP-tree from %d transactions: %d frequent items, %d nodes",
            len(transactions),
            len(self.header_table),
            sum(len(chain) for chain in self.header_table.values()),
        )

    def _insert(self, items: list[Any]) -> None:
        node = self.root
        for item in items:
            child = node.children.get(item)
            if child is None:
                child = FPNode(item, node)
                node.children[item] = child
                self.header_table.setdefault(item, []).append(child)
            else:
                child.frequency += 1
            node = child

    @property
    def empty(self) -> bool:
        """``True`` when no transaction contributed a frequent item."""
        return not self.root.children

    def nodes(self, item: Any) -> Iterator[FPNode]:
        """Iterate over the node-link chain of *item*."""
        return iter(self.header_table.get(item, ()))

    def support(self, item: Any) -> int:
        """Total support of *item*: the sum of frequencies along its chain."""
        return sum(node.frequency for node in self.nodes(item))

    def __len__(self) -> int:
        return sum(len(chain) for chain in self.header_table.values())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"items={len(self.header_table)}, "
            f"nodes={len(self)}, "
            f"minimum_support_threshold={self.minimum_support_threshold})"
        )
