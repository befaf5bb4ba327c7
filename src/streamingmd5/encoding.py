from __future__ import annotations


class EncodingError(ValueError):
    """Raised when text cannot be encoded to UTF-8 for hashing.

    ``position`` counts UTF-16 code units, not ``str`` indices: every
    character above U+FFFF before the error counts twice.
    """

    def __init__(self, position: int, reason: str):
        super().__init__(f"cannot encode text at code unit {position}: {reason}")
        self.position = position
        self.reason = reason


def _join_surrogates(text: str) -> str:
    # Round-trip through UTF-16 so that valid pairs become one code point.
    units = text.encode("utf-16-le", "surrogatepass")
    try:
        return units.decode("utf-16-le")
    except UnicodeDecodeError as exc:
        raise EncodingError(exc.start // 2, "unpaired surrogate") from exc


def encode_utf8(text: str) -> bytes:
    """
    Encode text to UTF-8 the way a UTF-16 string is encoded.

    A well-formed high/low surrogate pair stored as two separate code points
    is combined into a single 4-byte sequence, exactly as if the string held
    the astral character itself. Unpaired surrogates are rejected.

    Args:
        text: The string to encode.

    Returns:
        The UTF-8 bytes of ``text``.

    Raises:
        TypeError: If text is not a str
        EncodingError: If text holds a lone or out-of-order surrogate
    """
    if not isinstance(text, str):
        raise TypeError("text must be str")
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        # Only surrogate code points fail the strict codec.
        return _join_surrogates(text).encode("utf-8")


def encode_ascii(text: str) -> bytes:
    """
    Encode text one byte per character.

    Code values above 0xFF are truncated to their low 8 bits.
    """
    if not isinstance(text, str):
        raise TypeError("text must be str")
    try:
        return text.encode("latin-1")
    except UnicodeEncodeError:
        return bytes(ord(char) & 0xFF for char in text)


__all__ = ["EncodingError", "encode_ascii", "encode_utf8"]
