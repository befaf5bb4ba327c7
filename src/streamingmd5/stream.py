"""
Function-style streaming API.

Each call takes the context explicitly and returns it, so calls chain the
same way as the ``MD5Context`` methods they wrap::

    ctx = reset()
    append_text(ctx, "hello ")
    append_bytes(ctx, b"world")
    finalize(ctx)
"""

from __future__ import annotations

from typing import Optional, Union

from .compress import HashState
from .md5 import BytesLike, MD5Context


def reset(context: Optional[MD5Context] = None) -> MD5Context:
    """Return ``context`` cleared to the initial state, or a new context."""
    if context is None:
        return MD5Context()
    return context.reset()


def append_text(context: MD5Context, text: str) -> MD5Context:
    return context.append_text(text)


def append_ascii(context: MD5Context, text: str) -> MD5Context:
    return context.append_ascii(text)


def append_bytes(context: MD5Context, data: BytesLike) -> MD5Context:
    return context.append_bytes(data)


def finalize(context: MD5Context, raw: bool = False) -> Union[str, HashState]:
    return context.finalize(raw)


__all__ = ["append_ascii", "append_bytes", "append_text", "finalize", "reset"]
