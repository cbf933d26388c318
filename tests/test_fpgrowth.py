"""DataFrame-level FP-Growth tests."""

from __future__ import annotations

import unittest

import numpy as np
import pandas as pd
import pytest
from test_fpbase import (
    REFERENCE_CASES,
    FPTestEdgeCases,
    FPTestErrors,
    FPTestEx1All,
    FPTestEx2All,
    brute_force_patterns,
)

from fptree import FPGrowth, fpgrowth


def _estimator(df, **kwargs):  # type: ignore[no-untyped-def]
    return FPGrowth(**kwargs).fit(df).freq_itemsets


class TestEdgeCases(unittest.TestCase, FPTestEdgeCases):
    def setUp(self) -> None:  # type: ignore[override]
        FPTestEdgeCases.setUp(self, fpgrowth)


class TestErrors(unittest.TestCase, FPTestErrors):
    def setUp(self) -> None:  # type: ignore[override]
        FPTestErrors.setUp(self, fpgrowth)


class TestEx1(unittest.TestCase, FPTestEx1All):
    def setUp(self) -> None:  # type: ignore[override]
        FPTestEx1All.setUp(self, fpgrowth)


class TestEx1BoolInput(unittest.TestCase, FPTestEx1All):
    def setUp(self) -> None:  # type: ignore[override]
        one_ary = np.array(
            [
                [False, False, False, True, False, True, True, True, True, False, True],
                [False, False, True, True, False, True, False, True, True, False, True],
                [True, False, False, True, False, True, True, False, False, False, False],
                [False, True, False, False, False, True, True, False, False, True, True],
                [False, True, False, True, True, True, False, False, True, False, False],
            ]
        )
        FPTestEx1All.setUp(self, fpgrowth, one_ary=one_ary)


class TestEx2(unittest.TestCase, FPTestEx2All):
    def setUp(self) -> None:  # type: ignore[override]
        FPTestEx2All.setUp(self, fpgrowth)


class TestEstimatorEdgeCases(unittest.TestCase, FPTestEdgeCases):
    def setUp(self) -> None:  # type: ignore[override]
        FPTestEdgeCases.setUp(self, _estimator)


class TestEstimatorErrors(unittest.TestCase, FPTestErrors):
    def setUp(self) -> None:  # type: ignore[override]
        FPTestErrors.setUp(self, _estimator)


class TestEstimatorEx1(unittest.TestCase, FPTestEx1All):
    def setUp(self) -> None:  # type: ignore[override]
        FPTestEx1All.setUp(self, lambda df, min_support=0.5, **kw: _estimator(df, min_support=min_support, **kw))


# ---------------------------------------------------------------------------
# Input types
# ---------------------------------------------------------------------------


def _to_dataframe(transactions: list[list[str | int]]) -> pd.DataFrame:
    # Convert a list of transactions to a boolean one-hot encoded DataFrame
    items = sorted({item for t in transactions for item in t})
    data = [{item: (item in t) for item in items} for t in transactions]
    return pd.DataFrame(data)


def _as_counts(res: pd.DataFrame, n_rows: int) -> dict[tuple, int]:
    return {tuple(sorted(i)): round(s * n_rows) for i, s in zip(res["itemsets"], res["support"])}


@pytest.mark.parametrize(("transactions", "min_count", "expected"), REFERENCE_CASES)
def test_list_input_matches_reference(transactions, min_count, expected) -> None:  # type: ignore[no-untyped-def]
    n = len(transactions)
    res = fpgrowth(transactions, min_support=min_count / n)
    assert _as_counts(res, n) == expected


@pytest.mark.parametrize(("transactions", "min_count", "expected"), REFERENCE_CASES)
def test_one_hot_input_matches_reference(transactions, min_count, expected) -> None:  # type: ignore[no-untyped-def]
    df = _to_dataframe(transactions)
    res = fpgrowth(df, min_support=min_count / len(df), use_colnames=True)
    assert _as_counts(res, len(df)) == expected


def test_numpy_input() -> None:
    arr = np.array([[1, 1, 0], [1, 0, 1], [1, 1, 1], [0, 1, 0]])
    res = fpgrowth(arr, min_support=0.5)
    assert _as_counts(res, 4) == {(0,): 3, (1,): 3, (0, 1): 2, (2,): 2, (0, 2): 2}

    named = fpgrowth(arr, min_support=0.5, use_colnames=True)
    assert frozenset({"0", "1"}) in set(named["itemsets"])


def test_numpy_input_must_be_2d() -> None:
    with pytest.raises(ValueError, match="numpy array must be 2-D"):
        fpgrowth(np.array([1, 0, 1]), min_support=0.5)


def test_unsupported_input_type() -> None:
    with pytest.raises(TypeError, match="Expected a pandas DataFrame"):
        fpgrowth({"a": [1, 0]}, min_support=0.5)


def test_null_values_count_as_absent() -> None:
    df = pd.DataFrame({"a": [1.0, 1.0, np.nan], "b": [np.nan, 1.0, 1.0]})
    with pytest.warns(DeprecationWarning):
        res = fpgrowth(df, min_support=0.5, null_values=True, use_colnames=True)
    assert _as_counts(res, 3) == {("a",): 2, ("b",): 2}


def test_nullable_boolean_missing_values_count_as_absent() -> None:
    df = pd.DataFrame(
        {
            "a": pd.array([True, None, True], dtype="boolean"),
            "b": pd.array([None, True, True], dtype="boolean"),
        }
    )
    res = fpgrowth(df, min_support=0.5, null_values=True, use_colnames=True)
    assert _as_counts(res, 3) == {("a",): 2, ("b",): 2}


def test_polars_input() -> None:
    pl = pytest.importorskip("polars")
    pytest.importorskip("pyarrow")
    df = pl.DataFrame({"x": [True, True, False], "y": [True, True, True]})
    res = fpgrowth(df, min_support=0.6, use_colnames=True)
    assert _as_counts(res, 3) == {("y",): 3, ("x",): 2, ("x", "y"): 2}


def test_pyarrow_input() -> None:
    pa = pytest.importorskip("pyarrow")
    table = pa.table({"x": [True, False, True], "y": [True, True, True]})
    res = fpgrowth(table, min_support=0.6, use_colnames=True)
    assert _as_counts(res, 3) == {("y",): 3, ("x",): 2, ("x", "y"): 2}


def test_support_threshold_is_not_lost_to_rounding() -> None:
    # 0.7 * 10 is 7.000000000000001 in floating point
    transactions = [["a"]] * 7 + [["b"]] * 3
    res = fpgrowth(transactions, min_support=0.7)
    assert _as_counts(res, 10) == {("a",): 7}


def test_random_data_matches_brute_force(random_transactions) -> None:  # type: ignore[no-untyped-def]
    n = len(random_transactions)
    for min_count in (3, 10, 25):
        res = fpgrowth(random_transactions, min_support=min_count / n)
        assert _as_counts(res, n) == brute_force_patterns(random_transactions, min_count)


# ---------------------------------------------------------------------------
# Estimator
# ---------------------------------------------------------------------------


def test_estimator_requires_fit() -> None:
    model = FPGrowth(min_support=0.5)
    assert "fitted=False" in repr(model)
    with pytest.raises(RuntimeError, match="Call fit"):
        _ = model.freq_itemsets


def test_estimator_fit_list_of_transactions() -> None:
    model = FPGrowth(min_support=0.5).fit([["milk", "bread"], ["milk"], ["bread", "eggs"], ["milk", "bread"]])
    assert model.n_transactions_ == 4
    assert "fitted=True" in repr(model)
    assert model.freqItemsets is model.freq_itemsets
    assert _as_counts(model.freq_itemsets, 4) == {("milk",): 3, ("bread",): 3, ("bread", "milk"): 2}


def test_estimator_max_len() -> None:
    model = FPGrowth(min_support=0.3, max_len=1).fit(_to_dataframe([["a", "b"], ["a", "b"], ["a"]]))
    assert model.freq_itemsets["itemsets"].apply(len).max() == 1


# ---------------------------------------------------------------------------
# Apache Spark MLlib Ported Tests
# ---------------------------------------------------------------------------


def test_spark_mllib_fpgrowth_string() -> None:
    transactions = [
        "r z h k p".split(" "),
        "z y x w v u t s".split(" "),
        "s x o n r".split(" "),
        "x z y m t s q e".split(" "),
        ["z"],
        "x z y r q t p".split(" "),
    ]
    df = _to_dataframe(transactions)

    res = fpgrowth(df, min_support=0.9, use_colnames=True)
    assert len(res) == 0

    res = fpgrowth(df, min_support=0.5, use_colnames=True)
    assert len(res) == 18

    freq_dict = _as_counts(res, len(df))
    assert freq_dict[("z",)] == 5
    assert freq_dict[("x",)] == 4
    assert freq_dict[("t", "x", "y", "z")] == 3

    assert len(fpgrowth(df, min_support=0.3, use_colnames=True)) == 54
    assert len(fpgrowth(df, min_support=0.1, use_colnames=True)) == 625


def test_spark_mllib_fpgrowth_int() -> None:
    transactions = [
        [1, 2, 3],
        [1, 2, 3, 4],
        [5, 4, 3, 2, 1],
        [6, 5, 4, 3, 2, 1],
        [2, 4],
        [1, 3],
        [1, 7],
    ]
    df = _to_dataframe(transactions)  # type: ignore[arg-type]

    assert len(fpgrowth(df, min_support=0.9, use_colnames=True)) == 0

    res = fpgrowth(df, min_support=0.5, use_colnames=True)
    assert _as_counts(res, len(df)) == {
        (1,): 6,
        (2,): 5,
        (3,): 5,
        (4,): 4,
        (1, 2): 4,
        (1, 3): 5,
        (2, 3): 4,
        (2, 4): 4,
        (1, 2, 3): 4,
    }

    assert len(fpgrowth(df, min_support=0.3, use_colnames=True)) == 15
    assert len(fpgrowth(df, min_support=0.1, use_colnames=True)) == 65


def test_repeated_items_dataset_across_thresholds() -> None:
    # Eleven baskets, some listing an item twice; counts from the fp-growth crate test suite
    transactions = [
        ["a", "c", "e", "b", "f", "h", "a", "e", "f"],
        ["a", "c", "g"],
        ["e"],
        ["e", "c", "a", "g", "d"],
        ["a", "c", "e", "g"],
        ["e", "e"],
        ["a", "c", "e", "b", "f"],
        ["a", "c", "d"],
        ["g", "c", "e", "a"],
        ["a", "c", "e", "g"],
        ["i"],
    ]

    test_cases = [(1, 88), (2, 43), (3, 15), (4, 15), (5, 11), (6, 7), (7, 4), (8, 4), (9, 0)]

    for min_supp_count, expected_patterns in test_cases:
        res = fpgrowth(transactions, min_support=min_supp_count / len(transactions))
        assert len(res) == expected_patterns
