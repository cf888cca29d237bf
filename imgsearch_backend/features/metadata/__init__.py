"""Embedded XMP metadata feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .image_data import ImageData

__all__ = [
    "ImageData",
    "get_rating",
    "get_tags",
    "get_title",
    "get_authors",
    "extract_xmp_fields",
    "read_xmp_metadata",
]

_READER_EXPORTS = ("get_rating", "get_tags", "get_title", "get_authors", "extract_xmp_fields", "read_xmp_metadata")


def __getattr__(name: str):
    if name == "ImageData":
        from .image_data import ImageData as _ImageData

        return _ImageData
    if name in _READER_EXPORTS:
        from . import xmp_reader

        return getattr(xmp_reader, name)
    raise AttributeError(name)
