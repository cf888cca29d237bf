"""
Locate the embedded ``<rdf:RDF>...</rdf:RDF>`` packet inside an image file.

The scan is a single forward pass over the decoded stream. It does not know
anything about the container format (JPEG, PNG, TIFF...): XMP packets are
stored as plain text inside the file, so matching the literal markers is
enough. Memory use is bounded by the fragment, not the file.
"""
from __future__ import annotations

import codecs
from collections.abc import Iterator
from typing import IO, Any

from ...config import DEFAULT_XMP_CHUNK_SIZE, DEFAULT_XMP_ENCODING

XMP_BEGIN_MARKER = "<rdf:RDF"
XMP_END_MARKER = "</rdf:RDF>"


def _iter_chars(stream: IO[Any], encoding: str, chunk_size: int) -> Iterator[str]:
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        if isinstance(chunk, str):
            yield from chunk
        else:
            yield from decoder.decode(chunk)
    yield from decoder.decode(b"", final=True)


def locate_xmp_fragment(
    stream: IO[Any],
    *,
    encoding: str = DEFAULT_XMP_ENCODING,
    chunk_size: int = DEFAULT_XMP_CHUNK_SIZE,
    max_scan_chars: int = 0,
) -> str | None:
    """
    Return the first ``<rdf:RDF ... </rdf:RDF>`` span of ``stream``.

    Args:
        stream: Seekable binary or text file object. Rewound before scanning.
        encoding: Codec used to decode binary streams (invalid bytes are replaced).
        chunk_size: Number of bytes/characters read per call.
        max_scan_chars: Stop after this many characters (0 = whole stream).

    Returns:
        The fragment including both markers, or None if no complete span exists.

    Raises:
        ValueError: if ``stream`` is None.
    """
    if stream is None:
        raise ValueError("stream is required")

    stream.seek(0)

    begin_len = len(XMP_BEGIN_MARKER)
    end_len = len(XMP_END_MARKER)

    probe = ""
    armed = False
    collected: list[str] | None = None
    scanned = 0

    for c in _iter_chars(stream, encoding, max(1, int(chunk_size))):
        scanned += 1
        if max_scan_chars and scanned > max_scan_chars:
            return None

        if collected is None:
            if c == "<":
                armed = True
            if not armed:
                continue
            probe += c
            if len(probe) == begin_len and probe == XMP_BEGIN_MARKER:
                collected = list(probe)
            elif len(probe) > begin_len:
                # false start; the overflowing character is dropped with the probe
                probe = ""
                armed = False
            continue

        collected.append(c)
        if c == ">" and "".join(collected[-end_len:]) == XMP_END_MARKER:
            return "".join(collected)

    return None
