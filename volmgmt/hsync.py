"""Shared, reference-counted access to system handles."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

__all__ = ["HandleClosedError", "Handle"]


class HandleClosedError(Exception):
    """Raised when a closed handle is used."""

    def __init__(self, message: str = "handle already closed") -> None:
        super().__init__(message)


class _Coordinator:
    """Central reference counter for one system handle."""

    def __init__(self, handle: Any, closer: Callable[[Any], object] | None) -> None:
        self._lock = threading.Lock()
        self.handle = handle
        self._closer = closer
        self._refs = 0  # the system handle is live while refs >= 0

    def add(self, delta: int) -> None:
        with self._lock:
            if self._refs < 0:
                raise RuntimeError(
                    "attempted use of closed system handle: reference counter already below zero"
                )
            self._refs += delta
            if self._refs < 0 and self._closer is not None:
                self._closer(self.handle)


class Handle:
    """Shared access to a system handle by one or more instances.

    The system handle is released through ``closer`` once every instance,
    the original and all clones, has been closed.
    """

    def __init__(self, handle: Any, closer: Callable[[Any], object] | None = None) -> None:
        self._lock = threading.Lock()
        self._source: _Coordinator | None = _Coordinator(handle, closer)

    @classmethod
    def _from_source(cls, source: _Coordinator) -> Handle:
        instance = cls.__new__(cls)
        instance._lock = threading.Lock()
        instance._source = source
        return instance

    def clone(self) -> Handle:
        """Return an independent instance sharing the same system handle."""
        with self._lock:
            if self._source is None:
                raise HandleClosedError("attempt to clone a handle that has already been closed")
            self._source.add(1)
            return Handle._from_source(self._source)

    def close(self) -> None:
        """Release this instance; the last one to close releases the system handle."""
        with self._lock:
            if self._source is None:
                raise HandleClosedError()
            self._source.add(-1)
            self._source = None

    def handle(self) -> Any:
        """Return the protected system handle."""
        with self._lock:
            if self._source is None:
                raise HandleClosedError(
                    "attempt to retrieve a system handle that has already been closed"
                )
            return self._source.handle

    @property
    def closed(self) -> bool:
        """Whether this instance has been closed."""
        with self._lock:
            return self._source is None

    def __enter__(self) -> Handle:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.closed:
            self.close()