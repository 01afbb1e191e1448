"""N-gram construction and hashing (core domain).

Both generators return one hash per n-gram in order of occurrence. When the
input is too short to form a single full n-gram, the whole input is hashed
as one n-gram instead of returning nothing.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Sequence

from winnowing.ports import HashReducer

WORD_DELIMITER = " "


def tokenize_words(text: str) -> List[str]:
    """Split on single spaces, strip each token and drop empty ones."""

    tokens = (part.strip() for part in text.split(WORD_DELIMITER))
    return [token for token in tokens if token]


def char_input_is_degenerate(text: str, size: int) -> bool:
    return len(text) < size


def char_ngram_hashes(text: str, size: int, reducer: HashReducer) -> List[int]:
    """Hash every overlapping run of ``size`` characters."""

    if char_input_is_degenerate(text, size):
        return [reducer(text)]
    return [reducer(text[i : i + size]) for i in range(len(text) - size + 1)]


def word_ngram_hashes(text: str, size: int, reducer: HashReducer) -> List[int]:
    """Hash every overlapping run of ``size`` words, joined by one space."""

    return token_ngram_hashes(tokenize_words(text), size, reducer)


def token_ngram_hashes(tokens: Sequence[str], size: int, reducer: HashReducer) -> List[int]:
    """Hash every overlapping run of ``size`` already split tokens."""

    hashes: List[int] = []
    buffer: Deque[str] = deque()
    for token in tokens:
        buffer.append(token)
        if len(buffer) == size:
            hashes.append(reducer(WORD_DELIMITER.join(buffer)))
            buffer.popleft()

    # Fewer tokens than one full window: hash whatever was collected.
    if not hashes:
        hashes.append(reducer(WORD_DELIMITER.join(buffer)))
    return hashes
