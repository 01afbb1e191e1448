from __future__ import annotations

import dataclasses

import pytest

from winnowing.config import DEFAULT_CONFIG, InvalidConfiguration, WinnowConfig


def test_default_config_values() -> None:
    assert DEFAULT_CONFIG.min_detected_length == 8
    assert DEFAULT_CONFIG.noise_threshold == 4
    assert DEFAULT_CONFIG.window_size == 5


@pytest.mark.parametrize(
    ("min_detected_length", "noise_threshold", "window_size"),
    [(15, 5, 11), (8, 8, 1), (1, 1, 1), (50, 1, 50)],
)
def test_window_size_is_derived(min_detected_length: int, noise_threshold: int, window_size: int) -> None:
    config = WinnowConfig(min_detected_length, noise_threshold)
    assert config.window_size == min_detected_length - noise_threshold + 1 == window_size


def test_noise_threshold_above_min_length_is_rejected() -> None:
    with pytest.raises(InvalidConfiguration):
        WinnowConfig(5, 10)


def test_non_positive_lengths_are_rejected() -> None:
    with pytest.raises(InvalidConfiguration):
        WinnowConfig(0, 0)
    with pytest.raises(InvalidConfiguration):
        WinnowConfig(4, -1)


def test_invalid_configuration_is_a_value_error() -> None:
    assert issubclass(InvalidConfiguration, ValueError)


def test_config_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.min_detected_length = 10  # type: ignore[misc]
