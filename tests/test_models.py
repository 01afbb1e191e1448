from __future__ import annotations

from winnowing.models import Fingerprint


def test_from_hashes_sorts_and_deduplicates() -> None:
    fingerprint = Fingerprint.from_hashes([9, 3, 9, 1, 3])
    assert fingerprint.to_list() == [1, 3, 9]
    assert list(fingerprint) == [1, 3, 9]
    assert len(fingerprint) == 3


def test_membership_and_set_view() -> None:
    fingerprint = Fingerprint.from_hashes([4, 2])
    assert 2 in fingerprint
    assert 5 not in fingerprint
    assert fingerprint.as_set() == frozenset({2, 4})


def test_empty_fingerprint() -> None:
    assert Fingerprint().to_list() == []
    assert len(Fingerprint()) == 0
