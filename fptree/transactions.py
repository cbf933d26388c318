from __future__ import annotations

import time
import typing
from collections import Counter
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd
from scipy import sparse as sp

from ._compat import to_pandas

if TYPE_CHECKING:
    from ._compat import DataFrame


def from_transactions(
    data: DataFrame | Sequence[Sequence[Any]] | Any,
    transaction_col: str | None = None,
    item_col: str | None = None,
    min_item_count: int = 1,
    verbose: int = 0,
) -> pd.DataFrame:
    """Convert transactional data to a one-hot boolean matrix.

    Parameters
    ----------
    data
        One of:

        - **Pandas / Polars DataFrame** or **PyArrow Table** in long format,
          with (at least) two columns: one for the transaction identifier
          and one for the item.
        - **List of lists** where each inner list contains the items of a
          single transaction, e.g. ``[["bread", "milk"], ["bread", "eggs"]]``.

    transaction_col
        Name of the column that identifies transactions.  If ``None`` the
        first column is used.  Ignored for list-of-lists input.

    item_col
        Name of the column that contains item values.  If ``None`` the
        second column is used.  Ignored for list-of-lists input.

    min_item_count
        Minimum number of transactions an item must appear in to get a
        column.  Default is 1.

    Returns
    -------
    pandas.DataFrame
        A sparse boolean DataFrame ready for :func:`fptree.fpgrowth`.
        Column names are the unique items converted to ``str``, sorted
        with numbers ahead of strings.

    Examples
    --------
    >>> import fptree
    >>> ohe = fptree.from_transactions([["bread", "milk"], ["bread", "eggs"]])
    >>> list(ohe.columns)
    ['bread', 'eggs', 'milk']
    """
    data = to_pandas(data)

    if isinstance(data, (list, tuple)):
        return _from_list(data, min_item_count=min_item_count, verbose=verbose)

    if isinstance(data, pd.DataFrame):
        return _from_dataframe(data, transaction_col, item_col, min_item_count=min_item_count, verbose=verbose)

    raise TypeError(f"Expected a Pandas/Polars DataFrame, PyArrow Table or list of lists, got {type(data)}")


def to_transactions(df: pd.DataFrame) -> list[list[Any]]:
    """Turn a one-hot DataFrame back into one list of column names per row.

    Examples
    --------
    >>> import pandas as pd
    >>> from fptree import to_transactions
    >>> to_transactions(pd.DataFrame({"a": [True, False], "b": [True, True]}))
    [['a', 'b'], ['b']]
    """
    df = to_pandas(df)
    columns = list(df.columns)
    csr = _to_csr(df)
    return [[columns[j] for j in row] for row in _csr_rows(csr)]


def _to_csr(df: pd.DataFrame) -> sp.csr_matrix:
    if hasattr(df, "sparse"):
        csr = df.sparse.to_coo().tocsr()
    else:
        csr = sp.csr_matrix(df.to_numpy(dtype=bool, na_value=False))
    csr.eliminate_zeros()
    return csr


def _csr_rows(csr: sp.csr_matrix) -> list[list[int]]:
    indptr, indices = csr.indptr, csr.indices
    return [sorted(indices[indptr[i] : indptr[i + 1]].tolist()) for i in range(csr.shape[0])]


def _from_list(
    transactions: Sequence[Sequence[Any]],
    min_item_count: int = 1,
    verbose: int = 0,
) -> pd.DataFrame:
    t0 = 0.0
    if verbose:
        print(f"[{time.strftime('%X')}] Extracting unique items from list of lists...")
        t0 = time.perf_counter()

    counts: Counter[Any] = Counter()
    for txn in transactions:
        counts.update(set(txn))
    all_items = sorted(
        (item for item, count in counts.items() if count >= min_item_count),
        key=lambda x: (isinstance(x, str), x),
    )
    item_to_idx = {item: i for i, item in enumerate(all_items)}

    n_txn = len(transactions)
    n_items = len(all_items)

    if verbose:
        print(f"[{time.strftime('%X')}] Found {n_items:,} unique items. Building COO coordinates...")

    row_idx: list[int] = []
    col_idx: list[int] = []
    for i, txn in enumerate(transactions):
        for item in set(txn):
            if item in item_to_idx:
                row_idx.append(i)
                col_idx.append(item_to_idx[item])

    csr = sp.csr_matrix(
        (np.ones(len(row_idx), dtype=bool), (np.array(row_idx, dtype=np.int64), np.array(col_idx, dtype=np.int64))),
        shape=(n_txn, n_items),
    )

    result = pd.DataFrame.sparse.from_spmatrix(
        csr,
        columns=[str(item) for item in all_items],
    ).astype(pd.SparseDtype("bool", fill_value=False))

    if verbose:
        print(f"[{time.strftime('%X')}] One-hot encoding completed in {time.perf_counter() - t0:.2f}s.")

    return result


def _from_dataframe(
    df: pd.DataFrame,
    transaction_col: str | None,
    item_col: str | None,
    min_item_count: int = 1,
    verbose: int = 0,
) -> pd.DataFrame:
    t0 = 0.0
    if verbose:
        print(f"[{time.strftime('%X')}] Encoding long-format DataFrame (shape={df.shape})...")
        t0 = time.perf_counter()

    cols = list(df.columns)

    if len(cols) < 2:
        raise ValueError(f"DataFrame must have at least 2 columns (transaction id + item), got {len(cols)}: {cols}")

    txn_col = transaction_col or cols[0]
    itm_col = item_col or cols[1]

    if txn_col not in df.columns:
        raise ValueError(f"Transaction column '{txn_col}' not found. Available columns: {cols}")
    if itm_col not in df.columns:
        raise ValueError(f"Item column '{itm_col}' not found. Available columns: {cols}")

    df = df.drop_duplicates(subset=[txn_col, itm_col])
    if min_item_count > 1:
        counts = df[itm_col].value_counts()
        valid_items = typing.cast("pd.Index", counts[counts >= min_item_count].index)
        df = df.loc[df[itm_col].isin(valid_items)]

    txn_codes, _ = pd.factorize(df[txn_col], sort=False)
    item_codes, item_uniques = pd.factorize(df[itm_col], sort=True)

    n_txn = int(txn_codes.max()) + 1 if len(txn_codes) else 0
    csr = sp.csr_matrix(
        (np.ones(len(txn_codes), dtype=bool), (txn_codes.astype(np.int64), item_codes.astype(np.int64))),
        shape=(n_txn, len(item_uniques)),
    )

    result = pd.DataFrame.sparse.from_spmatrix(csr, columns=[str(c) for c in item_uniques]).astype(
        pd.SparseDtype("bool", fill_value=False)
    )

    if verbose:
        print(f"[{time.strftime('%X')}] One-hot encoding completed in {time.perf_counter() - t0:.2f}s.")

    return result
