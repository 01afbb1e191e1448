from __future__ import annotations

from winnowing.winnow import winnow


def test_selects_distinct_window_minima_in_ascending_order() -> None:
    assert winnow([5, 4, 4, 7, 2, 2, 9], 3) == [2, 4]


def test_every_window_contributes_its_minimum() -> None:
    hashes = [77, 74, 42, 17, 98, 50, 17, 98, 8, 88, 67, 39, 77, 74, 42, 17, 98]
    assert winnow(hashes, 4) == [8, 17, 39]


def test_window_of_one_keeps_every_hash() -> None:
    assert winnow([7, 3, 9, 3, 1], 1) == [1, 3, 7, 9]


def test_sequence_shorter_than_window_selects_nothing() -> None:
    assert winnow([3, 1, 2], 5) == []
    assert winnow([], 1) == []


def test_sequence_equal_to_window_selects_its_minimum() -> None:
    assert winnow([6, 2, 9], 3) == [2]
