"""
Fallback XMP reader built on Pillow.

Some containers store the packet compressed (PNG zTXt/compressed iTXt) so
the literal markers never appear in the raw bytes. Pillow decodes those
chunks while opening the image; this reader picks the packet out of
``Image.info`` and runs the regular locator over it.
"""

from __future__ import annotations

import io
from typing import IO, Any, Optional

from PIL import Image

from ...shared import get_logger
from .xmp_locator import locate_xmp_fragment

logger = get_logger(__name__)

_XMP_INFO_KEYS = ("xmp", "XML:com.adobe.xmp")


def _xmp_payload_from_info(info: dict[str, Any]) -> str | bytes | None:
    for key in _XMP_INFO_KEYS:
        value = info.get(key)
        if isinstance(value, (str, bytes)) and value:
            return value
    return None


def read_xmp_packet_with_pillow(stream: IO[bytes], encoding: str = "utf-8") -> Optional[str]:
    """
    Return the ``<rdf:RDF>`` fragment Pillow exposes for ``stream``.

    Returns None when Pillow cannot open the image or it has no packet.
    The stream is rewound but not closed.
    """
    try:
        stream.seek(0)
        with Image.open(stream) as img:
            payload = _xmp_payload_from_info(dict(getattr(img, "info", {}) or {}))
    except Exception as exc:
        logger.debug("Pillow could not open image for XMP fallback: %s", exc)
        return None

    if payload is None:
        return None

    buffer: IO[Any] = io.StringIO(payload) if isinstance(payload, str) else io.BytesIO(payload)
    return locate_xmp_fragment(buffer, encoding=encoding)
