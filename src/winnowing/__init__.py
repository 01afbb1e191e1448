"""Core domain package for winnowprint.

Core contains normalization, n-gram hashing, and window selection without any
file, CLI, or logging-setup code, keeping the fingerprinting logic portable.
"""

from winnowing.config import DEFAULT_CONFIG, InvalidConfiguration, WinnowConfig
from winnowing.engine import FingerprintEngine
from winnowing.hashing import DigestReducer, md5_reduce
from winnowing.models import Fingerprint

__all__ = [
    "DEFAULT_CONFIG",
    "DigestReducer",
    "Fingerprint",
    "FingerprintEngine",
    "InvalidConfiguration",
    "WinnowConfig",
    "md5_reduce",
]
