"""Compute-once holder for per-image parsed metadata."""
import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class OnceCell(Generic[T]):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._filled = False
        self._value: T | None = None

    @property
    def filled(self) -> bool:
        return self._filled

    def get_or_init(self, factory: Callable[[], T]) -> T:
        if self._filled:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._filled:
                self._value = factory()
                self._filled = True
        return self._value  # type: ignore[return-value]
