"""Token hash reduction (core domain)."""

from __future__ import annotations

import hashlib

from winnowing.config import InvalidConfiguration

DEFAULT_ALGORITHM = "md5"
DEFAULT_ENCODING = "utf-8"
DEFAULT_MODULUS = 10000


def _check_algorithm(algorithm: str) -> None:
    try:
        digest_size = hashlib.new(algorithm).digest_size
    except (ValueError, TypeError) as exc:
        raise InvalidConfiguration(f"Unsupported hash algorithm: {algorithm}") from exc
    # Variable-length digests (shake_*) report a digest_size of 0.
    if digest_size < 4:
        raise InvalidConfiguration(f"Hash algorithm {algorithm} must produce at least 4 digest bytes")


def _check_encoding(encoding: str) -> None:
    try:
        # Also rejects binary codecs such as "hex" that codecs.lookup accepts.
        "".encode(encoding)
    except (LookupError, TypeError) as exc:
        raise InvalidConfiguration(f"Unknown text encoding: {encoding}") from exc


class DigestReducer:
    """Reduce a token to ``[0, modulus)`` through a hashlib digest.

    The first four digest bytes are read as a signed little-endian 32-bit
    integer, and the absolute value of its remainder is returned. With the
    defaults (MD5, UTF-8, 10000) this reproduces the reference fingerprints.
    """

    def __init__(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        encoding: str = DEFAULT_ENCODING,
        modulus: int = DEFAULT_MODULUS,
    ) -> None:
        _check_algorithm(algorithm)
        _check_encoding(encoding)
        if modulus < 1:
            raise InvalidConfiguration(f"Hash modulus must be positive, got {modulus}")
        self._algorithm = algorithm
        self._encoding = encoding
        self._modulus = modulus

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def modulus(self) -> int:
        return self._modulus

    def __call__(self, token: str) -> int:
        digest = hashlib.new(self._algorithm, token.encode(self._encoding)).digest()
        value = int.from_bytes(digest[:4], "little", signed=True)
        # Truncated remainder then abs, which equals abs(value) % modulus.
        return abs(value) % self._modulus

    def __repr__(self) -> str:
        return (
            f"DigestReducer(algorithm={self._algorithm!r}, "
            f"encoding={self._encoding!r}, modulus={self._modulus})"
        )


def build_reducer(
    algorithm: str = DEFAULT_ALGORITHM,
    encoding: str = DEFAULT_ENCODING,
    modulus: int = DEFAULT_MODULUS,
) -> DigestReducer:
    """Build a reducer from configuration values."""

    try:
        modulus = int(modulus)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"Hash modulus must be an integer, got {modulus!r}") from exc
    return DigestReducer(algorithm=algorithm, encoding=encoding, modulus=modulus)


md5_reduce = DigestReducer()
