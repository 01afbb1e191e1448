"""Core domain models.

The fingerprint value type is shared by the engine, the CLI and any caller
that compares documents, so it avoids tying consumers to engine internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Tuple


@dataclass(frozen=True)
class Fingerprint:
    """Distinct selected hashes of one document, in ascending order."""

    values: Tuple[int, ...] = ()

    @classmethod
    def from_hashes(cls, hashes: Iterable[int]) -> "Fingerprint":
        return cls(values=tuple(sorted(set(hashes))))

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def to_list(self) -> List[int]:
        return list(self.values)

    def as_set(self) -> FrozenSet[int]:
        """Return the values as a frozenset, e.g. for intersecting fingerprints."""

        return frozenset(self.values)
