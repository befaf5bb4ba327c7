"""
Incremental, pure-Python MD5 for text and binary data.
"""

from .compress import INITIAL_STATE, compress_block
from .config import load_config
from .encoding import EncodingError
from .md5 import MD5Context, md5
from .oneshot import (
    MD5Digest,
    SharedMD5,
    hash_ascii,
    hash_bytes,
    hash_text,
    md5_digest,
)
from .selftest import run_self_test
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

if load_config().self_test:
    run_self_test()

__all__ = [
    "EncodingError",
    "INITIAL_STATE",
    "MD5Context",
    "MD5Digest",
    "SharedMD5",
    "compress_block",
    "hash_arrow_array",
    "hash_ascii",
    "hash_bytes",
    "hash_pandas_series",
    "hash_polars_series",
    "hash_text",
    "md5",
    "md5_digest",
    "run_self_test",
]
