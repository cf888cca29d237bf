"""Shared utilities for the image search metadata readers."""
from .log import get_logger, log_structured
from .result import Result
from .time import timer
from .types import ErrorCode, classify_file

__all__ = [
    "Result",
    "get_logger",
    "log_structured",
    "timer",
    "ErrorCode",
    "classify_file",
]
