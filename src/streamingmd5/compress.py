from __future__ import annotations

import struct
from typing import Sequence, Tuple

HashState = Tuple[int, int, int, int]

_MASK_32 = 0xFFFFFFFF

BLOCK_SIZE = 64

INITIAL_STATE: HashState = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# floor(2**32 * abs(sin(i + 1))) for i in 0..63
_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)

# Per-round rotation amount and message word index.
_ROTATIONS = tuple(_SHIFTS[i // 16][i % 4] for i in range(64))
_WORD_INDEX = (
    tuple(range(16))
    + tuple((5 * i + 1) % 16 for i in range(16))
    + tuple((3 * i + 5) % 16 for i in range(16))
    + tuple((7 * i) % 16 for i in range(16))
)


def rotl32(x: int, n: int) -> int:
    """Rotate left for 32-bit values."""
    x &= _MASK_32
    return ((x << n) | (x >> (32 - n))) & _MASK_32


def block_words(block: bytes) -> Tuple[int, ...]:
    """Read a 64-byte block as sixteen little-endian 32-bit words."""
    return struct.unpack("<16I", block)


def compress_block(state: Sequence[int], words: Sequence[int]) -> HashState:
    """
    Run the MD5 compression function over one block.

    Args:
        state: The four chaining words (A, B, C, D) before this block.
        words: Exactly sixteen 32-bit words making up the block.

    Returns:
        The chaining words after this block. Each working register is added
        back to its entry value, so feeding the result into the next call
        continues the hash chain.
    """
    a0, b0, c0, d0 = state
    a, b, c, d = a0, b0, c0, d0

    for i in range(64):
        if i < 16:
            f = (b & c) | (~b & d)
        elif i < 32:
            f = (b & d) | (c & ~d)
        elif i < 48:
            f = b ^ c ^ d
        else:
            f = c ^ (b | ~d)

        f = (f + a + _K[i] + words[_WORD_INDEX[i]]) & _MASK_32
        a, d, c = d, c, b
        b = (b + rotl32(f, _ROTATIONS[i])) & _MASK_32

    return (
        (a0 + a) & _MASK_32,
        (b0 + b) & _MASK_32,
        (c0 + c) & _MASK_32,
        (d0 + d) & _MASK_32,
    )


__all__ = ["BLOCK_SIZE", "HashState", "INITIAL_STATE", "block_words", "compress_block", "rotl32"]
