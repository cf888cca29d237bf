"""
Result pattern for error handling without exceptions.
Readers return Result[T] so "absent" and "malformed" travel as values.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from .types import ErrorCode

T = TypeVar("T")

@dataclass
class Result(Generic[T]):
    """
    Result pattern for safe error handling.

    Usage:
        def read_title(image) -> Result[str]:
            node = ...
            if node is None:
                return Result.Err(ErrorCode.NOT_FOUND, "dc:title not present")
            return Result.Ok(text)
    """
    ok: bool
    data: Optional[T] = None
    error: Optional[str] = None
    code: str = "OK"  # OK, NOT_FOUND, PARSE_ERROR, METADATA_FAILED, ...
    meta: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def Ok(data: T, **meta: Any) -> "Result[T]":
        """Create a successful result with data and optional metadata."""
        return Result(ok=True, data=data, code="OK", meta=meta)

    @staticmethod
    def Err(code: ErrorCode | str | Enum, error: str, **meta: Any) -> "Result[T]":
        """Create an error result with code, message, and optional metadata."""
        try:
            code_value = code.value if isinstance(code, Enum) else code
        except Exception:
            code_value = code
        return Result(ok=False, error=error, code=str(code_value), meta=meta)

    @property
    def absent(self) -> bool:
        """True when the value is simply not there (as opposed to broken)."""
        return not self.ok and self.code == ErrorCode.NOT_FOUND.value

    def unwrap(self) -> T:
        """Get data or raise ValueError if error."""
        if self.ok and self.data is not None:
            return self.data
        raise ValueError(f"[{self.code}] {self.error}")

