"""FP-Growth: recursive mining of frequent patterns from an :class:`FPTree`."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .tree import FPNode, FPTree
from .typing import Pattern, Transaction, TransformedPrefixPath

logger = logging.getLogger(__name__)


def contains_single_path(fptree: FPTree | FPNode) -> bool:
    """Whether no node at or below the starting point has more than one child.

    An empty tree counts as a (degenerate) single path.
    """
    node = fptree.root if isinstance(fptree, FPTree) else fptree
    while node.children:
        if len(node.children) > 1:
            return False
        (node,) = node.children.values()
    return True


def conditional_pattern_base(fptree: FPTree, item: Any) -> list[TransformedPrefixPath]:
    """Collect the prefix paths of every occurrence of *item*.

    Each path lists the items from the occurrence's parent up to, but not
    including, the root, weighted by the occurrence's frequency.  Occurrences
    hanging directly off the root have an empty prefix and are skipped.
    """
    base: list[TransformedPrefixPath] = []
    for occurrence in fptree.nodes(item):
        weight = occurrence.frequency
        node = occurrence.parent
        assert node is not None, "occurrence node without a parent"
        if node.is_root:
            continue

        path: list[Any] = []
        while not node.is_root:
            assert node.frequency >= weight, f"frequency increases below {node!r}"
            path.append(node.item)
            node = node.parent
            assert node is not None, "parent chain does not end at the root"
        base.append(TransformedPrefixPath(path, weight))
    return base


def _add_pattern(patterns: dict[frozenset[Any], int], items: frozenset[Any], support: int) -> None:
    previous = patterns.setdefault(items, support)
    assert previous == support, (
        f"itemset {sorted(items)!r} generated with conflicting supports {previous} and {support}"
    )


def _single_path_patterns(fptree: FPTree) -> dict[frozenset[Any], int]:
    # Every non-empty subset of the chain; its support is the frequency of
    # its deepest node since frequencies never increase towards the leaf.
    patterns: dict[frozenset[Any], int] = {}
    (node,) = fptree.root.children.values()
    depth = 0
    while True:
        depth += 1
        for items, support in list(patterns.items()):
            assert node.frequency <= support
            patterns[items | {node.item}] = node.frequency
        patterns[frozenset([node.item])] = node.frequency

        if not node.children:
            break
        assert len(node.children) == 1
        (node,) = node.children.values()

    logger.debug("Single path of length %d yields %d patterns", depth, len(patterns))
    return patterns


def _multi_path_patterns(fptree: FPTree) -> dict[frozenset[Any], int]:
    patterns: dict[frozenset[Any], int] = {}

    for item in sorted(fptree.header_table):
        base = conditional_pattern_base(fptree, item)
        conditional_transactions = [path.items for path in base for _ in range(path.weight)]
        logger.debug(
            "Item %r: %d prefix paths, %d conditional transactions",
            item,
            len(base),
            len(conditional_transactions),
        )

        conditional_tree = FPTree(conditional_transactions, fptree.minimum_support_threshold)
        conditional_patterns = fptree_growth(conditional_tree)

        item_support = fptree.support(item)
        _add_pattern(patterns, frozenset([item]), item_support)
        for pattern in conditional_patterns:
            assert pattern.support <= item_support, (
                f"conditional support {pattern.support} exceeds support {item_support} of {item!r}"
            )
            _add_pattern(patterns, pattern.items | {item}, pattern.support)

    return patterns


def fptree_growth(fptree: FPTree) -> set[Pattern]:
    """Mine every frequent pattern of *fptree*.

    Single-path trees are enumerated directly as the powerset of the path.
    Otherwise each header-table item is mined through its conditional
    FP-tree and the per-item results are merged.

    Parameters
    ----------
    fptree:
        Tree to mine.  Conditional trees are built with the same
        ``minimum_support_threshold``.

    Returns
    -------
    set[Pattern]
        One :class:`~fptree.typing.Pattern` per frequent itemset, carrying its
        absolute support.  An empty tree yields an empty set.
    """
    if fptree.empty:
        return set()

    if contains_single_path(fptree):
        patterns = _single_path_patterns(fptree)
    else:
        patterns = _multi_path_patterns(fptree)

    return {Pattern(items, support) for items, support in patterns.items()}


def mine_patterns(
    transactions: Iterable[Transaction],
    minimum_support_threshold: int,
) -> set[Pattern]:
    """Build an :class:`FPTree` from *transactions* and mine it.

    Examples
    --------
    >>> from fptree import mine_patterns
    >>> patterns = mine_patterns([["a", "b"], ["a"], ["b", "c"]], 2)
    >>> sorted((sorted(p.items), p.support) for p in patterns)
    [(['a'], 2), (['b'], 2)]
    """
    transactions = list(transactions)
    fptree = FPTree(transactions, minimum_support_threshold)
    patterns = fptree_growth(fptree)
    logger.debug(
        "Mined %d patterns from %d transactions (minimum support %d)",
        len(patterns),
        len(transactions),
        minimum_support_threshold,
    )
    return patterns
