from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Package settings read from the environment.

    Example
    >>> from streamingmd5.config import load_config
    >>> isinstance(load_config().self_test, bool)
    True
    """

    self_test: bool


def _getenv_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "t", "yes", "y"}


def load_config() -> Config:
    return Config(self_test=_getenv_bool("STREAMINGMD5_SELFTEST", True))


__all__ = ["Config", "load_config"]
