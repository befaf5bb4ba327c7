from __future__ import annotations

import struct
from typing import Tuple, Union

from .compress import BLOCK_SIZE, INITIAL_STATE, HashState, block_words, compress_block
from .encoding import encode_ascii, encode_utf8

_MASK_64 = 0xFFFFFFFFFFFFFFFF

# Offset of the 8-byte bit-length field in the final block.
_LENGTH_OFFSET = BLOCK_SIZE - 8

BytesLike = Union[bytes, bytearray, memoryview]


def _bit_length_words(byte_length: int) -> Tuple[int, int]:
    """Split the message bit length into (low, high) 32-bit words, mod 2**64."""
    high, low = divmod((byte_length * 8) & _MASK_64, 1 << 32)
    return low, high


def render_hex(words: HashState) -> str:
    """Render the chaining words as 32 lowercase hex characters, low byte first."""
    return struct.pack("<4I", *words).hex()


class MD5Context:
    """
    Incremental MD5 with a 64-byte working buffer.

    Data may be appended as text (UTF-8 encoded), as byte-range text or as raw
    bytes, in any chunking and interleaving. Every complete block is drained
    into the chaining state before an append returns, so at most 63 bytes are
    ever held back.

    ``finalize`` consumes the context; call ``reset`` before reusing it. The
    hashlib-style ``digest``/``hexdigest`` accessors finalize a copy instead and
    leave the context open for more input.

    A context is not safe to mutate from several threads at once.
    """

    name = "md5"
    digest_size = 16
    block_size = BLOCK_SIZE

    def __init__(self, data: Union[str, BytesLike, None] = None):
        self._buffer = bytearray(BLOCK_SIZE)
        self.reset()
        if data is not None:
            self.update(data)

    @property
    def state(self) -> HashState:
        return self._state

    @property
    def buffer_length(self) -> int:
        return self._buffer_length

    @property
    def total_length(self) -> int:
        """Bytes already drained into the chaining state."""
        return self._total_length

    def reset(self) -> "MD5Context":
        self._state: HashState = INITIAL_STATE
        self._buffer[:] = bytes(BLOCK_SIZE)
        self._buffer_length = 0
        self._total_length = 0
        return self

    def copy(self) -> "MD5Context":
        dup = self.__class__.__new__(self.__class__)
        dup._state = self._state
        dup._buffer = bytearray(self._buffer)
        dup._buffer_length = self._buffer_length
        dup._total_length = self._total_length
        return dup

    def append_text(self, text: str) -> "MD5Context":
        # Encoding runs before any byte is buffered, so a rejected string
        # leaves the context untouched.
        return self.append_bytes(encode_utf8(text))

    def append_ascii(self, text: str) -> "MD5Context":
        return self.append_bytes(encode_ascii(text))

    def append_bytes(self, data: BytesLike) -> "MD5Context":
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")

        view = memoryview(data).cast("B")
        size = len(view)
        buf = self._buffer
        buf_len = self._buffer_length
        pos = 0
        while True:
            take = min(size - pos, BLOCK_SIZE - buf_len)
            buf[buf_len:buf_len + take] = view[pos:pos + take]
            buf_len += take
            pos += take
            if buf_len < BLOCK_SIZE:
                break
            self._drain()
            buf_len = 0

        self._buffer_length = buf_len
        return self

    def update(self, data: Union[str, BytesLike]) -> "MD5Context":
        if isinstance(data, str):
            return self.append_text(data)
        return self.append_bytes(data)

    def finalize(self, raw: bool = False) -> Union[str, HashState]:
        """
        Pad the buffered tail, run the last compression(s) and return the digest.

        Args:
            raw: Return the four chaining words instead of the hex string.

        Returns:
            32 lowercase hex characters, or a tuple of four 32-bit words.
        """
        buf = self._buffer
        buf_len = self._buffer_length
        self._total_length += buf_len

        buf[buf_len] = 0x80
        buf[buf_len + 1:] = bytes(BLOCK_SIZE - buf_len - 1)
        if buf_len >= _LENGTH_OFFSET:
            self._state = compress_block(self._state, block_words(buf))
            buf[:] = bytes(BLOCK_SIZE)

        struct.pack_into("<2I", buf, _LENGTH_OFFSET, *_bit_length_words(self._total_length))
        self._state = compress_block(self._state, block_words(buf))
        self._buffer_length = 0

        if raw:
            return self._state
        return render_hex(self._state)

    def digest(self) -> bytes:
        return struct.pack("<4I", *self.copy().finalize(raw=True))

    def hexdigest(self) -> str:
        return self.copy().finalize()

    def intdigest(self) -> int:
        return int.from_bytes(self.digest(), byteorder="big", signed=False)

    # Internal helpers -------------------------------------------------
    def _drain(self) -> None:
        self._state = compress_block(self._state, block_words(self._buffer))
        self._total_length += BLOCK_SIZE


def md5(data: Union[str, BytesLike, None] = None) -> MD5Context:
    """Convenience constructor matching hashlib-style usage."""
    return MD5Context(data)


__all__ = ["MD5Context", "md5", "render_hex"]
