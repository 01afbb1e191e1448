"""Text normalization for character n-grams (core domain)."""

from __future__ import annotations

import re

# ASCII whitespace only ([ \t\n\r\f\v]); no-break and other Unicode spaces
# are kept so fingerprints match the reference implementation.
_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)


def strip_whitespace_and_lower(text: str) -> str:
    """Remove all ASCII whitespace (not collapse) and lowercase the rest."""

    return _WHITESPACE_RE.sub("", text).lower()
