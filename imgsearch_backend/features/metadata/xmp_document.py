"""
Parse the located XMP fragment and memoize it on the image record.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Final, Mapping
from xml.etree import ElementTree as ET

from ...config import XmpSettings
from ...shared import ErrorCode, Result, get_logger, log_structured, timer
from .fallback_readers import read_xmp_packet_with_pillow
from .image_data import ImageData
from .xmp_locator import locate_xmp_fragment

logger = get_logger(__name__)

_MAX_DIAGNOSTIC_LENGTH = 200

XMP_NAMESPACES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
        "exif": "http://ns.adobe.com/exif/1.0/",
        "x": "adobe:ns:meta/",
        "xap": "http://ns.adobe.com/xap/1.0/",
        "tiff": "http://ns.adobe.com/tiff/1.0/",
        "dc": "http://purl.org/dc/elements/1.1/",
        # Windows Vista / Windows Live Photo Gallery
        "MicrosoftPhoto": "http://ns.microsoft.com/photo/1.0",
    }
)


def parse_xmp_document(text: str, *, source: str | None = None) -> Result[ET.Element]:
    """
    Parse an ``<rdf:RDF>`` fragment.

    A parse failure is logged once and returned as ``PARSE_ERROR``.

    Raises:
        ValueError: if ``text`` is None.
    """
    if text is None:
        raise ValueError("text is required")

    try:
        root = ET.fromstring(text)
    except (ET.ParseError, UnicodeError, ValueError) as exc:
        # lone surrogates from text streams fail while expat encodes the input
        detail = " ".join(str(exc).split())[:_MAX_DIAGNOSTIC_LENGTH]
        message = f"Error while parsing XMP document: {detail}" if detail else "Error while parsing XMP document"
        log_structured(logger, logging.WARNING, message, source=source)
        return Result.Err(ErrorCode.PARSE_ERROR, message)
    return Result.Ok(root)


def _locate_fragment(image: ImageData, settings: XmpSettings) -> str | None:
    fragment = locate_xmp_fragment(
        image.stream,
        encoding=settings.encoding,
        chunk_size=settings.chunk_size,
        max_scan_chars=settings.max_scan_chars,
    )
    if not fragment and settings.pillow_fallback:
        fragment = read_xmp_packet_with_pillow(image.stream, encoding=settings.encoding)
    return fragment


def _build_document(image: ImageData, settings: XmpSettings) -> Result[ET.Element]:
    with timer(f"xmp locate+parse ({image.path or 'stream'})", logger):
        fragment = _locate_fragment(image, settings)
        if not fragment:
            return Result.Err(ErrorCode.NOT_FOUND, "No XMP packet in image")
        return parse_xmp_document(fragment, source=image.path)


def load_xmp_document(image: ImageData, settings: XmpSettings | None = None) -> Result[ET.Element]:
    """
    Return the parsed XMP document of ``image``, locating and parsing it on first use.

    The outcome (document, NOT_FOUND or PARSE_ERROR) is stored on the image,
    so later calls never touch the stream again.
    """
    if image is None:
        raise ValueError("image is required")
    active = settings or image.settings
    return image.xmp_document.get_or_init(lambda: _build_document(image, active))
