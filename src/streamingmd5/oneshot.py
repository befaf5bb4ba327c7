from __future__ import annotations

import struct
import threading
from dataclasses import dataclass
from typing import Union

from .compress import HashState
from .md5 import BytesLike, MD5Context, render_hex


@dataclass(frozen=True)
class MD5Digest:
    words: HashState

    def digest(self) -> bytes:
        return struct.pack("<4I", *self.words)

    def hexdigest(self) -> str:
        return render_hex(self.words)

    def intdigest(self) -> int:
        return int.from_bytes(self.digest(), byteorder="big", signed=False)


def md5_digest(data: Union[str, BytesLike]) -> MD5Digest:
    """
    Hash a complete string or byte buffer in one call.

    Args:
        data: Text (hashed as UTF-8) or any bytes-like object

    Returns:
        MD5Digest object with digest(), hexdigest(), and intdigest() methods.

    Raises:
        EncodingError: If text holds an unpaired surrogate
        TypeError: If data is neither str nor bytes-like
    """
    return MD5Digest(MD5Context(data).finalize(raw=True))


def hash_text(text: str, raw: bool = False) -> Union[str, HashState]:
    """MD5 of ``text`` encoded as UTF-8, as hex or as four raw words."""
    return MD5Context().append_text(text).finalize(raw)


def hash_ascii(text: str, raw: bool = False) -> Union[str, HashState]:
    """MD5 of ``text`` taken one byte per character, as hex or as four raw words."""
    return MD5Context().append_ascii(text).finalize(raw)


def hash_bytes(data: BytesLike, raw: bool = False) -> Union[str, HashState]:
    return MD5Context().append_bytes(data).finalize(raw)


class SharedMD5:
    """
    One reusable context shared by several callers.

    Each one-shot call holds a lock across reset, append and finalize, so
    concurrent callers are serialized instead of interleaving their input.
    """

    def __init__(self):
        self._context = MD5Context()
        self._lock = threading.Lock()

    def hash_text(self, text: str, raw: bool = False) -> Union[str, HashState]:
        with self._lock:
            return self._context.reset().append_text(text).finalize(raw)

    def hash_ascii(self, text: str, raw: bool = False) -> Union[str, HashState]:
        with self._lock:
            return self._context.reset().append_ascii(text).finalize(raw)

    def hash_bytes(self, data: BytesLike, raw: bool = False) -> Union[str, HashState]:
        with self._lock:
            return self._context.reset().append_bytes(data).finalize(raw)


__all__ = ["MD5Digest", "SharedMD5", "hash_ascii", "hash_bytes", "hash_text", "md5_digest"]
