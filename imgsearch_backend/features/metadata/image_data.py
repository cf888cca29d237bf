"""
Per-image record handed to the metadata readers.
"""
from __future__ import annotations

from os import PathLike
from typing import IO, Any
from xml.etree.ElementTree import Element

from ...config import XmpSettings
from ...shared import Result
from .metadata_cache import OnceCell


class ImageData:
    """
    A readable image plus the slots the readers cache their work in.

    The stream belongs to whoever created it. ``ImageData.open`` creates
    (and therefore closes) its own; a stream passed to the constructor is
    left open.
    """

    def __init__(
        self,
        stream: IO[Any],
        path: str | None = None,
        settings: XmpSettings | None = None,
    ):
        if stream is None:
            raise ValueError("stream is required")
        if not stream.seekable():
            raise ValueError("stream must be seekable")
        self.stream = stream
        self.path = path
        self.settings = settings or XmpSettings.from_env()
        self.xmp_document: OnceCell[Result[Element]] = OnceCell()
        self._owns_stream = False

    @classmethod
    def open(cls, path: str | PathLike[str], settings: XmpSettings | None = None) -> "ImageData":
        stream = open(path, "rb")
        try:
            image = cls(stream, path=str(path), settings=settings)
        except Exception:
            stream.close()
            raise
        image._owns_stream = True
        return image

    def close(self) -> None:
        if self._owns_stream:
            self.stream.close()

    def __enter__(self) -> "ImageData":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ImageData(path={self.path!r})"
