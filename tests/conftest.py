from __future__ import annotations

import pytest

REFERENCE_TEXT = (
    "This is for generating a fingerprint. We will have more than"
    " one sentence in the text. Text can be such that we are"
    " able to form n-grams out of it. I think this much of text"
    " should be sufficient. OK, this is last sentence!"
)

REFERENCE_CHAR_FINGERPRINT = [
    18, 19, 138, 144, 179, 268, 325, 493, 551, 640,
    765, 767, 769, 882, 930, 934, 1053, 1109, 1180, 1188,
    1208, 1320, 1456, 1469, 1475, 1522, 1535, 1659, 1689,
    1731, 1765, 1766, 1773, 1774, 1787, 1813, 1926, 1951,
    2102, 2145, 2244, 2362, 2406, 3107, 3240, 3263, 3266,
    3312, 3624, 3836, 4272, 4539, 4663, 4876, 4917,
]

REFERENCE_WORD_FINGERPRINT = [27, 1200, 1431, 1698, 1722, 1879, 2005, 2205, 3023, 4198, 5184, 5714, 5826]


class RecordingReducer:
    """Hash strategy that numbers tokens in call order and remembers them."""

    def __init__(self) -> None:
        self.tokens: list[str] = []

    def __call__(self, token: str) -> int:
        self.tokens.append(token)
        return len(self.tokens) - 1


@pytest.fixture
def reference_text() -> str:
    return REFERENCE_TEXT


@pytest.fixture
def recording_reducer() -> RecordingReducer:
    return RecordingReducer()


@pytest.fixture
def reference_char_fingerprint() -> list[int]:
    return list(REFERENCE_CHAR_FINGERPRINT)


@pytest.fixture
def reference_word_fingerprint() -> list[int]:
    return list(REFERENCE_WORD_FINGERPRINT)
