"""
Configuration for the XMP metadata readers.

Every value can be overridden through the environment; invalid values are
logged and replaced by the default.
"""
from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_XMP_ENCODING = "utf-8"
DEFAULT_XMP_CHUNK_SIZE = 64 * 1024
MAX_XMP_CHUNK_SIZE = 16 * 1024 * 1024


def _label(names: tuple[str, ...]) -> str:
    return names[0] if names else "<unknown>"


def _env_raw(*names: str) -> str | None:
    """First non-blank value among ``names``."""
    for name in names:
        value = os.getenv(name, "").strip() if name else ""
        if value:
            return value
    return None


def _env_int(default: int, *names: str, min_value: int | None = None, max_value: int | None = None) -> int:
    raw = _env_raw(*names)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using default=%s", _label(names), raw, default)
        return default
    bounded = value
    if min_value is not None:
        bounded = max(bounded, min_value)
    if max_value is not None:
        bounded = min(bounded, max_value)
    if bounded != value:
        logger.warning("Out of range %s=%s, clamped to %s", _label(names), value, bounded)
    return bounded


_TRUE_WORDS = frozenset({"1", "true", "yes", "on", "enabled"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off", "disabled"})


def _env_bool(default: bool, *names: str) -> bool:
    raw = _env_raw(*names)
    if raw is None:
        return default
    word = raw.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    logger.warning("Invalid boolean for %s=%r, using default=%s", _label(names), raw, default)
    return default


def _env_encoding(default: str, *names: str) -> str:
    raw = _env_raw(*names)
    if raw is None:
        return default
    try:
        return codecs.lookup(raw).name
    except LookupError:
        logger.warning("Unknown encoding for %s=%r, using default=%s", _label(names), raw, default)
        return default


@dataclass(frozen=True)
class XmpSettings:
    """Knobs for locating and parsing embedded XMP packets."""

    encoding: str = DEFAULT_XMP_ENCODING
    chunk_size: int = DEFAULT_XMP_CHUNK_SIZE
    # 0 scans the whole stream
    max_scan_chars: int = 0
    pillow_fallback: bool = False

    @classmethod
    def from_env(cls) -> "XmpSettings":
        return cls(
            encoding=_env_encoding(DEFAULT_XMP_ENCODING, "IMGSEARCH_XMP_ENCODING"),
            chunk_size=_env_int(
                DEFAULT_XMP_CHUNK_SIZE,
                "IMGSEARCH_XMP_CHUNK_SIZE",
                min_value=1,
                max_value=MAX_XMP_CHUNK_SIZE,
            ),
            max_scan_chars=_env_int(0, "IMGSEARCH_XMP_MAX_SCAN_CHARS", min_value=0),
            pillow_fallback=_env_bool(False, "IMGSEARCH_XMP_PILLOW_FALLBACK"),
        )

