"""Sliding-window hash selection (core domain)."""

from __future__ import annotations

from typing import List, Sequence, Set


def winnow(hashes: Sequence[int], window_size: int) -> List[int]:
    """Return the distinct window minima in ascending order.

    Every window of ``window_size`` consecutive hashes contributes its
    minimum, even when the same position was already selected by the
    previous window. Sequences shorter than one window select nothing.
    """

    selected: Set[int] = set()
    for i in range(len(hashes) - window_size + 1):
        selected.add(min(hashes[i : i + window_size]))
    return sorted(selected)
