from __future__ import annotations

from typing import Any, Callable, List, Optional

from .digest import hash_bytes


def _is_none(value: Any) -> bool:
    return value is None


def _hash_values(
    values: Any, algo: str, is_null: Callable[[Any], bool] = _is_none
) -> List[Optional[str]]:
    return [
        None if is_null(val) else hash_bytes(val, algo=algo).hexdigest()
        for val in values
    ]


def hash_pandas_series(series: Any, algo: str = "md2"):
    """
    Hash a pandas Series of str/bytes into a Series of hex digests.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    # pd.NA and NaN mark missing values alongside None.
    hashes = _hash_values(series, algo, is_null=pd.isna)
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="object")


def hash_arrow_array(array: Any, algo: str = "md2"):
    """
    Hash a pyarrow Array (or values coercible to one) into a string Array of hex digests.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = _hash_values(
        (val.as_py() if hasattr(val, "as_py") else val for val in arr), algo
    )
    return pa.array(hashes, type=pa.string())


def hash_polars_series(series: Any, algo: str = "md2"):
    """
    Hash a polars Series into a Utf8 Series of hex digests.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = _hash_values(ser, algo)
    name = getattr(ser, "name", None) or "md2"
    return pl.Series(name=name, values=hashes, dtype=pl.Utf8)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
