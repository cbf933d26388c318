from __future__ import annotations

import logging
import math
import time
import typing
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from ._compat import to_pandas
from ._fpbase import FPBase
from ._validation import check_min_support, valid_array_check, valid_input_check
from .growth import mine_patterns
from .transactions import _csr_rows, _to_csr
from .typing import Pattern

if TYPE_CHECKING:
    from ._compat import DataFrame

logger = logging.getLogger(__name__)


def fpgrowth(
    df: DataFrame | list[list[Any]] | Any,
    min_support: float = 0.5,
    null_values: bool = False,
    use_colnames: bool = False,
    max_len: int | None = None,
    verbose: int = 0,
) -> pd.DataFrame:
    """Find frequent itemsets using the FP-Growth algorithm.

    Parameters
    ----------
    df:
        Transactions.  Accepted types:
        * :class:`pandas.DataFrame` (dense or sparse, bool/int 0-1 values)
        * :class:`polars.DataFrame` / :class:`pyarrow.Table` (bool/int 0-1 values)
        * :class:`numpy.ndarray` (2-D, bool/int 0-1 values)
        * a list of transactions, each a list of items
    min_support:
        Minimum support threshold in ``(0, 1]``, as a fraction of the
        number of transactions.
    null_values:
        Allow NaN values in *df* (pandas only); NaN counts as absent.
    use_colnames:
        If ``True``, itemsets contain column names instead of column indices.
        List input always yields the items themselves.
    max_len:
        Maximum itemset length.  ``None`` means unlimited.
    verbose:
        If > 0, print progress details to standard output.

    Returns
    -------
    pandas.DataFrame
        Columns ``['support', 'itemsets']``.  Each itemset is a
        :class:`frozenset`; rows are ordered by itemset length, then by
        descending support.

    Examples
    --------
    >>> from fptree import fpgrowth
    >>> res = fpgrowth([["a", "b"], ["a"], ["a", "c"]], min_support=0.6)
    >>> res["itemsets"].tolist(), res["support"].tolist()
    ([frozenset({'a'})], [1.0])
    """
    check_min_support(min_support)

    t0 = time.perf_counter()
    df = to_pandas(df)

    if isinstance(df, (list, tuple)):
        transactions: list[list[Any]] = [list(t) for t in df]
        labels = None
    elif isinstance(df, np.ndarray):
        valid_array_check(df)
        transactions = [np.flatnonzero(row).tolist() for row in df]
        labels = [str(i) for i in range(df.shape[1])] if use_colnames else None
    elif isinstance(df, pd.DataFrame):
        valid_input_check(df, null_values)
        transactions = _csr_rows(_to_csr(df))
        labels = list(df.columns) if use_colnames else None
    else:
        raise TypeError(
            f"Expected a pandas DataFrame, polars DataFrame, pyarrow Table, "
            f"numpy array or list of transactions, got {type(df)}"
        )

    n_rows = len(transactions)
    min_count = _min_count(min_support, n_rows)
    if verbose:
        print(f"[{time.strftime('%X')}] Mining {n_rows:,} transactions with minimum count {min_count}...")

    patterns = mine_patterns(transactions, min_count)
    logger.info("FP-Growth found %d frequent itemsets in %d transactions", len(patterns), n_rows)

    result = _build_result(patterns, n_rows, labels, max_len)

    if verbose:
        print(f"[{time.strftime('%X')}] Found {len(result):,} itemsets in {time.perf_counter() - t0:.2f}s.")

    return result


def _min_count(min_support: float, n_rows: int) -> int:
    # Rounding first keeps e.g. 0.7 * 10 from becoming 8.
    return math.ceil(round(min_support * n_rows, 9))


def _build_result(
    patterns: Iterable[Pattern],
    n_rows: int,
    labels: list[Any] | None,
    max_len: int | None,
) -> pd.DataFrame:
    """Convert mined patterns to a ``support / itemsets`` DataFrame."""
    rows = [p for p in patterns if max_len is None or len(p.items) <= max_len]
    if not rows:
        return pd.DataFrame(columns=["support", "itemsets"])

    rows.sort(key=lambda p: (len(p.items), -p.support, sorted(p.items)))

    itemsets: list[frozenset] = [p.items for p in rows]
    if labels is not None:
        itemsets = [frozenset(labels[i] for i in iset) for iset in itemsets]

    result = pd.DataFrame(
        {
            "support": [p.support / n_rows for p in rows],
            "itemsets": itemsets,
        }
    )
    return typing.cast("pd.DataFrame", result)


class FPGrowth(FPBase):
    """FP-Growth estimator.

    Parameters
    ----------
    min_support:
        Minimum support threshold (fraction of transactions).
    use_colnames:
        Replace integer column indices with the actual column names in the
        output (same semantics as :func:`fptree.fpgrowth`).
    max_len:
        Maximum length of frequent itemsets to return.  ``None`` means no
        limit.

    Examples
    --------
    .. code-block:: python

        from fptree import FPGrowth

        model = FPGrowth(min_support=0.3).fit(pandas_df)
        model = FPGrowth(min_support=0.3).fit(polars_df)
        model = FPGrowth(min_support=0.3).fit([["milk", "bread"], ["milk"]])
        freq = model.freq_itemsets
    """

    def _mine(
        self,
        df: DataFrame | list[list[Any]] | Any,
    ) -> pd.DataFrame:
        return fpgrowth(
            df,
            min_support=self.min_support,
            null_values=self.null_values,
            use_colnames=self.use_colnames,
            max_len=self.max_len,
        )
