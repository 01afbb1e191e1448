"""Fingerprint engine (core facade).

This module is integration-agnostic. It only relies on the hash reducer port,
so alternative hash functions can be injected without touching the pipeline:

1) Normalize (character mode only)
2) Build the n-gram hash sequence
3) Select one hash per window
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from winnowing.config import DEFAULT_CONFIG, WinnowConfig
from winnowing.hashing import md5_reduce
from winnowing.models import Fingerprint
from winnowing.ngrams import (
    char_input_is_degenerate,
    char_ngram_hashes,
    token_ngram_hashes,
    tokenize_words,
)
from winnowing.normalize import strip_whitespace_and_lower
from winnowing.ports import HashReducer
from winnowing.winnow import winnow

LOGGER = logging.getLogger(__name__)


class FingerprintEngine:
    """Computes winnowing fingerprints for whole documents.

    Instances hold only immutable configuration and a stateless reducer, so
    one engine can be reused for any number of documents.
    """

    def __init__(
        self,
        min_detected_length: int = DEFAULT_CONFIG.min_detected_length,
        noise_threshold: int = DEFAULT_CONFIG.noise_threshold,
        *,
        reducer: Optional[HashReducer] = None,
    ) -> None:
        self._config = WinnowConfig(min_detected_length=min_detected_length, noise_threshold=noise_threshold)
        self._reducer: HashReducer = reducer if reducer is not None else md5_reduce

    @classmethod
    def from_config(cls, config: WinnowConfig, reducer: Optional[HashReducer] = None) -> "FingerprintEngine":
        return cls(config.min_detected_length, config.noise_threshold, reducer=reducer)

    @property
    def config(self) -> WinnowConfig:
        return self._config

    @property
    def reducer(self) -> HashReducer:
        return self._reducer

    def get_parameters(self) -> Dict[str, int]:
        """Return the effective winnowing parameters."""

        return {
            "min_detected_length": self._config.min_detected_length,
            "window_size": self._config.window_size,
        }

    def fingerprint_by_words(self, text: str) -> Fingerprint:
        """Fingerprint ``text`` using n-grams of space-delimited words."""

        tokens = tokenize_words(text)
        hashes = token_ngram_hashes(tokens, self._config.min_detected_length, self._reducer)
        degenerate = len(tokens) < self._config.min_detected_length
        return self._select(hashes, degenerate, "words")

    def fingerprint_by_characters(self, text: str) -> Fingerprint:
        """Fingerprint ``text`` using character n-grams.

        All whitespace is removed and the text is lowercased first, so layout
        and casing changes do not alter the fingerprint.
        """

        normalized = strip_whitespace_and_lower(text)
        hashes = char_ngram_hashes(normalized, self._config.min_detected_length, self._reducer)
        degenerate = char_input_is_degenerate(normalized, self._config.min_detected_length)
        return self._select(hashes, degenerate, "characters")

    def _select(self, hashes: List[int], degenerate: bool, mode: str) -> Fingerprint:
        # Inputs shorter than one n-gram are represented by their single hash.
        if degenerate:
            LOGGER.debug("Short input in %s mode, using whole-text hash", mode)
            return Fingerprint.from_hashes(hashes)

        selected = winnow(hashes, self._config.window_size)
        LOGGER.debug(
            "Fingerprinted by %s: ngrams=%s, selected=%s",
            mode,
            len(hashes),
            len(selected),
        )
        return Fingerprint(values=tuple(selected))
