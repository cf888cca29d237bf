"""Backend-facing alias for shared utilities."""

from __future__ import annotations

import imgsearch_shared as _root_shared

Result = _root_shared.Result
ErrorCode = _root_shared.ErrorCode
get_logger = _root_shared.get_logger
log_structured = _root_shared.log_structured
classify_file = _root_shared.classify_file
timer = _root_shared.timer

__all__ = [
    "Result",
    "ErrorCode",
    "get_logger",
    "log_structured",
    "classify_file",
    "timer",
]
