"""
Read rating, tags, title and authors from an image's embedded XMP packet.

Every reader has two forms:
- ``*_result(image)`` returns a Result (OK / NOT_FOUND / PARSE_ERROR)
- ``get_*(image)`` returns the value or None

Neither raises for missing or malformed metadata; only a missing image does.
"""
from __future__ import annotations

import math
import os
from typing import Any, Mapping
from xml.etree.ElementTree import Element

from ...config import XmpSettings
from ...shared import ErrorCode, Result, classify_file, get_logger
from .image_data import ImageData
from .xmp_document import XMP_NAMESPACES, load_xmp_document

logger = get_logger(__name__)

MIN_RATING = 0
MAX_RATING = 5
_PERCENT_SCALE = 100.0

_RATING_PATH = "rdf:Description/xap:Rating"
_DESCRIPTION_PATH = "rdf:Description"
_TAGS_PATH = "rdf:Description/dc:subject/rdf:Bag"
_TITLE_PATH = "rdf:Description/dc:title/rdf:Alt"
_AUTHORS_PATH = "rdf:Description/dc:creator/rdf:Seq"

# Both spellings occur in files written by Windows Photo Gallery
_MICROSOFT_PHOTO_URIS = ("http://ns.microsoft.com/photo/1.0", "http://ns.microsoft.com/photo/1.0/")


def _qname(namespaces: Mapping[str, str], prefix: str, local: str) -> str:
    return f"{{{namespaces[prefix]}}}{local}"


def _text_content(node: Element) -> str:
    return "".join(node.itertext())


def _absent(what: str) -> Result[Any]:
    return Result.Err(ErrorCode.NOT_FOUND, f"{what} not present")


def _parse_star_rating(text: str | None) -> int | None:
    if text is None:
        return None
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if MIN_RATING <= value <= MAX_RATING else None


def _parse_percent_rating(text: str | None) -> int | None:
    """Convert a 0..100 MicrosoftPhoto rating to 0..5 stars."""
    if text is None:
        return None
    try:
        percent = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(percent):
        return None
    stars = math.floor(percent / _PERCENT_SCALE * MAX_RATING)
    return stars if MIN_RATING <= stars <= MAX_RATING else None


def _microsoft_photo_rating(description: Element) -> str | None:
    for uri in _MICROSOFT_PHOTO_URIS:
        value = description.get(f"{{{uri}}}Rating")
        if value is not None:
            return value
    return None


def _rating_from_document(root: Element, namespaces: Mapping[str, str]) -> Result[int]:
    node = root.find(_RATING_PATH, namespaces)
    if node is not None:
        rating = _parse_star_rating(_text_content(node))
        return Result.Ok(rating) if rating is not None else _absent("xap:Rating")

    description = root.find(_DESCRIPTION_PATH, namespaces)
    if description is None:
        return _absent("rdf:Description")

    # xap:Rating written in attribute form
    attr = description.get(_qname(namespaces, "xap", "Rating"))
    if attr is not None:
        rating = _parse_star_rating(attr)
        return Result.Ok(rating) if rating is not None else _absent("xap:Rating")

    rating = _parse_percent_rating(_microsoft_photo_rating(description))
    if rating is None:
        return _absent("Rating")
    return Result.Ok(rating)


def _child_texts(root: Element, path: str, namespaces: Mapping[str, str]) -> Result[list[str]]:
    node = root.find(path, namespaces)
    if node is None:
        return _absent(path)
    return Result.Ok([_text_content(child) for child in node])


def _title_from_document(root: Element, namespaces: Mapping[str, str]) -> Result[str]:
    node = root.find(_TITLE_PATH, namespaces)
    if node is None or len(node) == 0:
        return _absent("dc:title")
    return Result.Ok(_text_content(node[0]))


def _with_document(image: ImageData) -> Result[Element]:
    if image is None:
        raise ValueError("image is required")
    return load_xmp_document(image)


def rating_result(image: ImageData, namespaces: Mapping[str, str] = XMP_NAMESPACES) -> Result[int]:
    """Star rating (0..5) from ``xap:Rating``, falling back to ``MicrosoftPhoto:Rating``."""
    doc = _with_document(image)
    if not doc.ok:
        return doc  # type: ignore[return-value]
    return _rating_from_document(doc.unwrap(), namespaces)


def tags_result(image: ImageData, namespaces: Mapping[str, str] = XMP_NAMESPACES) -> Result[list[str]]:
    """Keywords from ``dc:subject/rdf:Bag``, in document order."""
    doc = _with_document(image)
    if not doc.ok:
        return doc  # type: ignore[return-value]
    return _child_texts(doc.unwrap(), _TAGS_PATH, namespaces)


def title_result(image: ImageData, namespaces: Mapping[str, str] = XMP_NAMESPACES) -> Result[str]:
    """First alternative of ``dc:title/rdf:Alt``."""
    doc = _with_document(image)
    if not doc.ok:
        return doc  # type: ignore[return-value]
    return _title_from_document(doc.unwrap(), namespaces)


def authors_result(image: ImageData, namespaces: Mapping[str, str] = XMP_NAMESPACES) -> Result[list[str]]:
    """Creators from ``dc:creator/rdf:Seq``, in document order."""
    doc = _with_document(image)
    if not doc.ok:
        return doc  # type: ignore[return-value]
    return _child_texts(doc.unwrap(), _AUTHORS_PATH, namespaces)


def get_rating(image: ImageData) -> int | None:
    return rating_result(image).data


def get_tags(image: ImageData) -> list[str] | None:
    return tags_result(image).data


def get_title(image: ImageData) -> str | None:
    return title_result(image).data


def get_authors(image: ImageData) -> list[str] | None:
    return authors_result(image).data


def extract_xmp_fields(image: ImageData) -> dict[str, Any]:
    """All four fields at once; missing ones are None."""
    return {
        "rating": get_rating(image),
        "tags": get_tags(image),
        "title": get_title(image),
        "authors": get_authors(image),
    }


def read_xmp_metadata(path: str, settings: XmpSettings | None = None) -> Result[dict[str, Any]]:
    """
    Open ``path`` and extract its XMP fields.

    Returns UNSUPPORTED for non-image extensions, NOT_FOUND for a missing
    file, METADATA_FAILED when it cannot be read, and PARSE_ERROR when the
    embedded packet is malformed.
    """
    if not path:
        raise ValueError("path is required")
    if classify_file(path) != "image":
        return Result.Err(ErrorCode.UNSUPPORTED, f"Not an image: {os.path.basename(path)}")
    if not os.path.isfile(path):
        return Result.Err(ErrorCode.NOT_FOUND, f"File not found: {os.path.basename(path)}")

    try:
        with ImageData.open(path, settings=settings) as image:
            doc = load_xmp_document(image)
            if not doc.ok and not doc.absent:
                return doc  # type: ignore[return-value]
            fields = extract_xmp_fields(image)
    except OSError as exc:
        logger.warning("Failed to read %s: %s", os.path.basename(path), exc)
        return Result.Err(ErrorCode.METADATA_FAILED, f"Cannot read {os.path.basename(path)}")

    return Result.Ok(fields, has_xmp=doc.ok)
