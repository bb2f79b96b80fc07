"""Event handler holding a bounded list of callbacks."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from .errors import FullError, UtilsError

__all__ = ["EventKind", "Event"]


class EventKind(Enum):
    """Kind of callback an event accepts."""

    BASIC = 0
    EXTENDED = 1


class Event:
    """Up to ``size`` callbacks, all of one kind, called in registration order.

    Basic callbacks take no arguments; extended callbacks take one value.
    """

    def __init__(self, kind, size):
        if size <= 0:
            raise ValueError("event size must be positive")
        self.kind = EventKind(kind)
        self.size = size
        self._callbacks: list[Callable[..., Any]] = []

    @property
    def count(self):
        """Number of registered callbacks."""
        return len(self._callbacks)

    def __len__(self):
        return len(self._callbacks)

    def _add(self, callback, kind):
        if not callable(callback):
            raise TypeError("callback must be callable")
        if self.kind is not kind:
            raise UtilsError(f"event accepts {self.kind.name.lower()} callbacks only")
        if len(self._callbacks) >= self.size:
            raise FullError("event callback list is full")
        self._callbacks.append(callback)

    def _require(self, kind):
        if self.kind is not kind:
            raise UtilsError(f"event dispatches {self.kind.name.lower()} callbacks only")

    def register(self, callback):
        """Register a callback taking no arguments."""
        self._add(callback, EventKind.BASIC)

    def register_ex(self, callback):
        """Register a callback taking one value."""
        self._add(callback, EventKind.EXTENDED)

    def dispatch(self):
        """Call every basic callback."""
        self._require(EventKind.BASIC)
        for callback in self._callbacks:
            callback()

    def dispatch_ex(self, value):
        """Call every extended callback with ``value``."""
        self._require(EventKind.EXTENDED)
        for callback in self._callbacks:
            callback(value)