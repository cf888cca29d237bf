"""
Timing helper for the metadata readers.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def timer(label: str, logger: logging.Logger, level: int = logging.DEBUG) -> Iterator[None]:
    """
    Log how long the wrapped block took, at ``level``.

    Usage:
        with timer("xmp locate+parse", logger):
            load_xmp_document(image)
    """
    if not logger.isEnabledFor(level):
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.log(level, "%s took %.3fs", label, time.perf_counter() - start)
