"""
Logging setup: one console handler per logger, emoji per level.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Final

EMOJI_MAP: Final[dict[str, str]] = {
    "DEBUG": "🔍",
    "INFO": "ℹ️",
    "WARNING": "⚠️",
    "ERROR": "❌",
    "CRITICAL": "🔥",
}

PREFIX: Final[str] = "🖼️ ImgSearch"

# Top-level packages stripped from logger names
_PACKAGE_PREFIXES: Final[tuple[str, ...]] = ("imgsearch_backend", "imgsearch_shared")


class EmojiFormatter(logging.Formatter):
    """``🖼️ ImgSearch [⚠️] features.metadata.xmp_document: message``"""

    def __init__(self) -> None:
        super().__init__(f"{PREFIX} [%(emoji)s] %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        record.emoji = EMOJI_MAP.get(record.levelname, "🖼️")
        return super().format(record)


def _short_name(name: str) -> str:
    if name.startswith("__main__"):
        return "main"
    head, _, rest = name.partition(".")
    if rest and head in _PACKAGE_PREFIXES:
        return rest
    return name


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Logger under the ``imgsearch.`` namespace with the emoji console handler.

    Args:
        name: Logger name (usually __name__)
        level: Optional logging level; INFO when the logger is first configured

    Returns:
        The configured logger; repeated calls return the same instance
    """
    logger = logging.getLogger(f"imgsearch.{_short_name(name)}")

    if level is not None:
        logger.setLevel(level)

    if not logger.handlers:
        if level is None:
            logger.setLevel(logging.INFO)
        handler = logging.StreamHandler()
        handler.setFormatter(EmojiFormatter())
        logger.addHandler(handler)

    return logger


def log_structured(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """Emit a structured JSON log entry with contextual fields."""
    payload = {
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "context": context,
    }
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))
