"""Ports (interfaces) used by the core pipeline.

Ports define the minimal contracts for replaceable strategies so that the
core can be reused with different hash functions.
"""

from __future__ import annotations

from typing import Protocol


class HashReducer(Protocol):
    """Maps a string token to a small non-negative integer.

    Implementations must be deterministic and free of side effects; the same
    token always reduces to the same value.
    """

    def __call__(self, token: str) -> int:
        ...
