"""fptree – frequent itemset mining with FP-trees and FP-Growth."""

from .fpgrowth import FPGrowth, fpgrowth
from .growth import conditional_pattern_base, contains_single_path, fptree_growth, mine_patterns
from .transactions import from_transactions, to_transactions
from .tree import FPNode, FPTree
from .typing import Pattern, TransformedPrefixPath

__all__ = [
    "FPNode",
    "FPTree",
    "Pattern",
    "TransformedPrefixPath",
    "contains_single_path",
    "conditional_pattern_base",
    "fptree_growth",
    "mine_patterns",
    "fpgrowth",
    "FPGrowth",
    "from_transactions",
    "to_transactions",
]
