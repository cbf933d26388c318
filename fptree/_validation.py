"""Input validation for one-hot encoded inputs."""

from __future__ import annotations

import warnings

import numpy as np
import pandas as pd


def check_min_support(min_support: float) -> None:
    if not 0.0 < min_support <= 1.0:
        raise ValueError(
            "`min_support` must be a positive "
            "number within the interval `(0, 1]`. "
            "Got %s." % min_support
        )


def valid_input_check(df: pd.DataFrame, null_values: bool = False) -> None:
    """Validate a one-hot / boolean DataFrame before mining.

    Parameters
    ----------
    df:
        Input DataFrame.  Allowed values: 0/1 or True/False (and NaN if
        ``null_values=True``).
    null_values:
        Whether NaN values are allowed in *df*.
    """
    if df.size == 0:
        return

    is_sparse = hasattr(df, "sparse")
    if is_sparse and not isinstance(df.columns[0], str) and df.columns[0] != 0:
        raise ValueError(
            "Due to current limitations in Pandas, "
            "if the sparse format has integer column names,"
            "names, please make sure they either start "
            "with `0` or cast them as string column names: "
            "`df.columns = [str(i) for i in df.columns`]."
        )

    if df.dtypes.apply(pd.api.types.is_bool_dtype).all():
        return

    warnings.warn(
        "DataFrames with non-bool types result in worse computational "
        "performance and their support might be discontinued in the future. "
        "Please use a DataFrame with bool type",
        DeprecationWarning,
        stacklevel=3,
    )

    values = df.sparse.to_coo().data if is_sparse else df.to_numpy(dtype=float, na_value=np.nan)
    _check_values(np.asarray(values, dtype=float), null_values)


def valid_array_check(arr: np.ndarray) -> None:
    """Validate a 2-D 0/1 (or bool) NumPy array."""
    if arr.ndim != 2:
        raise ValueError(f"numpy array must be 2-D, got shape {arr.shape}")
    if arr.dtype != bool and arr.size:
        _check_values(np.asarray(arr, dtype=float), null_values=False)


def _check_values(values: np.ndarray, null_values: bool) -> None:
    has_nans = bool(np.isnan(values).any())
    if null_values and not has_nans:
        warnings.warn(
            "null_values=True is inefficient when there are no NaN values "
            "in the DataFrame. Set null_values=False for faster output.",
            stacklevel=4,
        )
    if not null_values and has_nans:
        raise ValueError("NaN values are not permitted in the DataFrame when null_values=False.")

    bad = (values != 1) & (values != 0) & ~np.isnan(values)
    if bad.any():
        val = values[bad][0]
        allowed = "True, False, 0, 1, NaN" if null_values else "True, False, 0, 1"
        raise ValueError(f"The allowed values for a DataFrame are {allowed}. Found value {_format_value(val)}")


def _format_value(val: float) -> str:
    return str(int(val)) if float(val).is_integer() else str(val)
