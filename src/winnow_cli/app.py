"""Application entry point for the winnow command."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import text2art

from winnow_cli import settings
from winnowing.config import InvalidConfiguration, WinnowConfig
from winnowing.engine import FingerprintEngine

NAME = "WINNOW"
FONT = "standard"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_PATH = "logs/winnow.log"
DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_LOG_BACKUPS = 5

DEMO_ANIMALS = ("duck", "monkey")
DEMO_FRUITS = ("apple", "orange", "banana")


def _print_banner() -> None:
    # Banner goes to stderr so stdout stays machine-readable JSON.
    print(text2art(NAME, font=FONT, space=1), file=sys.stderr)


def _log_file_handler(file_cfg: dict) -> RotatingFileHandler:
    path = file_cfg.get("path", DEFAULT_LOG_PATH)
    if not os.path.isabs(path):
        path = os.path.join(settings.PROJECT_ROOT, path)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=int(file_cfg.get("max_bytes", DEFAULT_LOG_MAX_BYTES)),
        backupCount=int(file_cfg.get("backup_count", DEFAULT_LOG_BACKUPS)),
        encoding="utf-8",
    )


def build_log_handlers(config: dict) -> list[logging.Handler]:
    """Return the handlers described by the "logging" section, if enabled."""

    if not config.get("enabled", False):
        return []

    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if config.get("console", True):
        handlers.append(logging.StreamHandler())
    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        handlers.append(_log_file_handler(file_cfg))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def _configure_logging(config: dict) -> None:
    handlers = build_log_handlers(config)
    if handlers:
        logging.basicConfig(level=handlers[0].level, handlers=handlers)


def _load_raw_config(path: Optional[str]) -> dict:
    if path is None:
        return settings.CONFIG
    return settings.load_config(path)


def _build_engine(args: argparse.Namespace, raw: dict) -> FingerprintEngine:
    """Build the engine from config file values overridden by CLI flags."""

    base = settings.build_winnow_config(raw)
    config = WinnowConfig(
        min_detected_length=(
            args.min_detected_length if args.min_detected_length is not None else base.min_detected_length
        ),
        noise_threshold=args.noise_threshold if args.noise_threshold is not None else base.noise_threshold,
    )
    return FingerprintEngine.from_config(config, reducer=settings.build_hash_reducer(raw))


def _read_document(source: Optional[str]) -> str:
    if source is None or source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as handle:
        return handle.read()


def build_demo_text() -> str:
    """Return the sample sentence list used by the demo command."""

    pairs = [f"{animal} and {fruit}" for animal in DEMO_ANIMALS for fruit in DEMO_FRUITS]
    return ", ".join(pairs)


def _run_demo(engine: FingerprintEngine) -> None:
    text = build_demo_text()
    print(f"Winnowing params: {json.dumps(engine.get_parameters())}")
    print(f'Input string: "{text}"')
    print(f"Fingerprint: {json.dumps(engine.fingerprint_by_characters(text).to_list())}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="winnow", description="Compute winnowing fingerprints of text documents.")
    parser.add_argument("--config", help="Path to a JSON config file (defaults to WINNOW_CONFIG or config.json)")
    parser.add_argument("-t", "--min-detected-length", type=int, help="Shared n-gram runs this long are always detected")
    parser.add_argument("-k", "--noise-threshold", type=int, help="Shared n-gram runs shorter than this are ignored")
    parser.add_argument("--no-banner", action="store_true", help="Do not print the banner")

    subparsers = parser.add_subparsers(dest="command")
    chars = subparsers.add_parser("chars", help="Fingerprint using character n-grams")
    chars.add_argument("file", nargs="?", help="Input file (stdin when omitted or '-')")
    words = subparsers.add_parser("words", help="Fingerprint using word n-grams")
    words.add_argument("file", nargs="?", help="Input file (stdin when omitted or '-')")
    subparsers.add_parser("params", help="Print the effective winnowing parameters")
    subparsers.add_parser("demo", help="Fingerprint a built-in sample string")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    raw = _load_raw_config(args.config)
    if not args.no_banner and bool(raw.get("banner", True)):
        _print_banner()
    _configure_logging(raw.get("logging", {}))
    logger = logging.getLogger(__name__)

    try:
        engine = _build_engine(args, raw)
    except InvalidConfiguration as exc:
        print(f"winnow: invalid configuration: {exc}", file=sys.stderr)
        return 2
    logger.info("Winnowing params: %s", engine.get_parameters())

    if args.command == "params":
        print(json.dumps(engine.get_parameters()))
        return 0
    if args.command == "demo":
        _run_demo(engine)
        return 0

    try:
        text = _read_document(args.file)
    except OSError as exc:
        parser.error(f"cannot read {args.file}: {exc}")

    if args.command == "words":
        fingerprint = engine.fingerprint_by_words(text)
    else:
        fingerprint = engine.fingerprint_by_characters(text)
    logger.info("Fingerprint has %s hashes", len(fingerprint))
    print(json.dumps(fingerprint.to_list()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
