from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    import numpy as np
    import pandas as pd
    import polars as pl
    import pyarrow as pa

    #: Union of all supported tabular input types.
    #:
    #: * ``pandas.DataFrame`` – including sparse-backed frames
    #: * ``polars.DataFrame`` – converted to pandas
    #: * ``pyarrow.Table`` – converted to pandas
    #: * ``numpy.ndarray`` – 2-D boolean / 0-1 matrix
    DataFrame = Union[pd.DataFrame, pl.DataFrame, pa.Table, np.ndarray]  # noqa: UP007


def _module_of(data: Any) -> str:
    return getattr(type(data), "__module__", "") or ""


def is_polars(data: Any) -> bool:
    return type(data).__name__ == "DataFrame" and _module_of(data).startswith("polars")


def is_arrow_table(data: Any) -> bool:
    return type(data).__name__ == "Table" and _module_of(data).startswith("pyarrow")


def to_pandas(data: Any) -> Any:
    """Coerce Polars/PyArrow inputs to a pandas DataFrame; return everything else unchanged."""
    # Both expose ``to_pandas``; neither library needs importing here.
    if is_polars(data) or is_arrow_table(data):
        return data.to_pandas()
    return data
