"""Environment variable helpers."""

from __future__ import annotations

import os

from zkutil.opt import OptString


def get_opt_env(key: str) -> OptString:
    """Return the environment variable ``key``; unset or empty gives a null optional."""
    value = os.environ.get(key)
    if value is None:
        return OptString()
    return OptString.not_empty(value)


def environment() -> dict[str, str]:
    """Return a copy of the environment variables."""
    return dict(os.environ)