"""
Shared types, enums, and constants.
"""
import os
from enum import Enum
from typing import Final, Literal

# File type classifications
FileKind = Literal["image", "unknown"]

# Error codes
class ErrorCode(str, Enum):
    """Standardized error codes (string enum)."""

    # Lookup
    NOT_FOUND = "NOT_FOUND"

    # Feature availability
    UNSUPPORTED = "UNSUPPORTED"

    # Operation errors
    METADATA_FAILED = "METADATA_FAILED"

    # Parsing
    PARSE_ERROR = "PARSE_ERROR"

# Image extensions known to carry embedded XMP packets
EXTENSIONS: Final[dict[FileKind, set[str]]] = {
    "image": {
        ".png", ".jpg", ".jpeg", ".webp", ".gif", ".tif", ".tiff",
        ".jxr", ".wdp", ".hdp", ".dng", ".psd",
    },
    "unknown": set(),
}

def classify_file(filename: str) -> FileKind:
    """
    Classify file by extension.

    Args:
        filename: File name or path

    Returns:
        File kind (image, unknown)
    """
    ext = os.path.splitext(filename)[1].lower()

    for kind, exts in EXTENSIONS.items():
        if ext in exts:
            return kind

    return "unknown"
