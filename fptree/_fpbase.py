"""Shared base class for frequent-pattern estimators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pandas as pd

    from ._compat import DataFrame


class FPBase(ABC):
    """Abstract base class for frequent-pattern estimators.

    Subclasses implement :meth:`_mine`; the base class stores the
    parameters, runs the miner on :meth:`fit` and exposes the results.

    Parameters
    ----------
    min_support:
        Minimum support threshold (fraction of transactions) in ``(0, 1]``.
    use_colnames:
        Replace integer column indices with actual column names in output.
    max_len:
        Maximum length of frequent itemsets.  ``None`` means no limit.
    null_values:
        Allow NaN values in pandas inputs.
    """

    def __init__(
        self,
        min_support: float = 0.3,
        use_colnames: bool = False,
        max_len: int | None = None,
        null_values: bool = False,
    ) -> None:
        self.min_support = min_support
        self.use_colnames = use_colnames
        self.max_len = max_len
        self.null_values = null_values

        self._freq_itemsets: pd.DataFrame | None = None
        self.n_transactions_: int = 0

    @abstractmethod
    def _mine(
        self,
        df: DataFrame | list[list[Any]] | Any,
    ) -> pd.DataFrame:
        """Run the mining algorithm and return a ``support / itemsets`` DataFrame."""
        ...

    def fit(self, df: DataFrame | list[list[Any]] | Any) -> FPBase:
        """Fit the model on a one-hot-encoded DataFrame, array or list of transactions."""
        self._freq_itemsets = self._mine(df)
        if hasattr(df, "shape"):
            self.n_transactions_ = int(df.shape[0])
        else:
            self.n_transactions_ = len(df)
        return self

    @property
    def freq_itemsets(self) -> pd.DataFrame:
        """Frequent itemsets DataFrame."""
        if self._freq_itemsets is None:
            raise RuntimeError("Call fit() before accessing freq_itemsets.")
        return self._freq_itemsets

    @property
    def freqItemsets(self) -> pd.DataFrame:  # noqa: N802
        """Alias for :attr:`freq_itemsets` (Spark camelCase spelling)."""
        return self.freq_itemsets

    def __repr__(self) -> str:
        fitted = self._freq_itemsets is not None
        return (
            f"{type(self).__name__}("
            f"min_support={self.min_support}, "
            f"max_len={self.max_len}, "
            f"fitted={fitted})"
        )
