"""
Pure-Python MD2 message digest with a streaming, hashlib-style API.
"""

from .md2 import MD2, md2, new
from .digest import Digest, file_digest, hash_bytes
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "MD2",
    "md2",
    "new",
    "Digest",
    "hash_bytes",
    "file_digest",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
