"""Core configuration dataclasses.

We keep config file parsing outside the core, but these dataclasses define
the shape the core expects so the CLI and other callers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class InvalidConfiguration(ValueError):
    """Raised when winnowing parameters cannot produce a usable engine."""


@dataclass(frozen=True)
class WinnowConfig:
    """Winnowing parameters consumed by the fingerprint engine.

    - min_detected_length (t): shared substrings at least this many n-grams
      long are guaranteed to be detected.
    - noise_threshold (k): shared substrings shorter than this are ignored.
    - window_size: derived as t - k + 1.
    """

    min_detected_length: int = 8
    noise_threshold: int = 4
    window_size: int = field(init=False)

    def __post_init__(self) -> None:
        if self.noise_threshold > self.min_detected_length:
            raise InvalidConfiguration(
                "Noise threshold, k, should not be greater than minimum match "
                f"guarantee threshold, t (k={self.noise_threshold}, t={self.min_detected_length})"
            )
        if self.min_detected_length < 1 or self.noise_threshold < 1:
            raise InvalidConfiguration(
                "min_detected_length and noise_threshold must be positive "
                f"(t={self.min_detected_length}, k={self.noise_threshold})"
            )
        # Frozen dataclass: derived fields are set through object.__setattr__.
        object.__setattr__(self, "window_size", self.min_detected_length - self.noise_threshold + 1)


DEFAULT_CONFIG = WinnowConfig()
