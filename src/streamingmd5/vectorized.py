from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .oneshot import hash_ascii, hash_bytes, hash_text

logger = logging.getLogger(__name__)


def _hash_value(value: Any, ascii: bool) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return hash_ascii(value) if ascii else hash_text(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return hash_bytes(value)
    raise TypeError(f"Unsupported type for MD5 hashing: {type(value)!r}")


def _hash_values(values: Iterable[Any], ascii: bool) -> List[Optional[str]]:
    hashes = [_hash_value(val, ascii) for val in values]
    logger.debug("hashed %d values", len(hashes))
    return hashes


def hash_pandas_series(series: Any, ascii: bool = False):
    """
    Hash a pandas Series of str/bytes into a Series of hex digests.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = _hash_values(series, ascii)
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="object")


def hash_arrow_array(array: Any, ascii: bool = False):
    """
    Hash a pyarrow Array (or values coercible to one) into a string Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = _hash_values(arr.to_pylist(), ascii)
    return pa.array(hashes, type=pa.string())


def hash_polars_series(series: Any, ascii: bool = False):
    """
    Hash a polars Series into a Utf8 Series.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = _hash_values(ser.to_list(), ascii)
    name = getattr(ser, "name", None) or "md5"
    return pl.Series(name=name, values=hashes, dtype=pl.Utf8)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
