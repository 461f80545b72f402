"""A multicast event that calls every connected handler."""

from __future__ import annotations

from typing import Any, Callable


class Event:
    """Handlers are called in the order they were connected."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> Callable[..., Any]:
        """Add ``handler``; connecting the same handler twice has no effect."""
        if handler not in self._handlers:
            self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Callable[..., Any]) -> None:
        """Remove ``handler``; raises ValueError if it is not connected."""
        self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        """Call every handler with ``args``."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers