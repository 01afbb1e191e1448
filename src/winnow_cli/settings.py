"""Static configuration for winnowprint.

All user-editable settings (winnowing parameters, hash strategy, banner,
logging) live in a single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

from winnowing.config import DEFAULT_CONFIG, InvalidConfiguration, WinnowConfig
from winnowing.hashing import DEFAULT_ALGORITHM, DEFAULT_ENCODING, DEFAULT_MODULUS, DigestReducer, build_reducer

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

# WINNOW_CONFIG may come from the environment or a local .env file.
load_dotenv()
CONFIG_PATH = os.getenv("WINNOW_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))


def load_config(path: str) -> dict:
    """Load a config file with a flat, user-friendly schema.

    A missing file means "use defaults"; a malformed one is an error.
    """

    if not os.path.exists(path):
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _int_setting(section: dict, key: str, default: int) -> int:
    value = section.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"{key} must be an integer, got {value!r}") from exc


def build_winnow_config(raw: dict) -> WinnowConfig:
    """Build core winnowing parameters from the "winnowing" section.

    Validation happens in the core, so bad values surface as
    InvalidConfiguration.
    """

    section = raw.get("winnowing", {})
    return WinnowConfig(
        min_detected_length=_int_setting(section, "min_detected_length", DEFAULT_CONFIG.min_detected_length),
        noise_threshold=_int_setting(section, "noise_threshold", DEFAULT_CONFIG.noise_threshold),
    )


def build_hash_reducer(raw: dict) -> DigestReducer:
    """Build the hash strategy from the "hash" section.

    Changing any of these values changes every fingerprint, so fingerprints
    are only comparable when produced with the same settings.
    """

    section = raw.get("hash", {})
    return build_reducer(
        algorithm=section.get("algorithm", DEFAULT_ALGORITHM),
        encoding=section.get("encoding", DEFAULT_ENCODING),
        modulus=section.get("modulus", DEFAULT_MODULUS),
    )


# Expose the raw config for modules that need structured access.
CONFIG = load_config(CONFIG_PATH)
