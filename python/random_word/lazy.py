"""Once-initialized, thread-safe lazy cell.

Every per-language cache (decompressed text, word table, indexes) lives in a
Lazy. The factory runs at most once; callers racing on first access block on
the cell's lock and then share the single result.
"""

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    """Value computed on first get() and cached for the process lifetime."""

    def __init__(self, factory: Callable[[], T]):
        """Initialize cell.

        Args:
            factory: Zero-argument callable producing the value.
        """
        self._factory = factory
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        """True once the value has been computed."""
        return self._value is not _UNSET

    def get(self) -> T:
        """Return the value, computing it on first call.

        If the factory raises, the exception propagates and the cell stays
        empty.
        """
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]

        with self._lock:
            # Double-check after acquiring lock
            if self._value is _UNSET:
                self._value = self._factory()
            return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        state = "initialized" if self.initialized else "pending"
        return f"Lazy({state})"
