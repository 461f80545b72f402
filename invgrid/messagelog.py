"""Named message logs that collect errors reported by the inventory."""

from __future__ import annotations

import logging

MESSAGE_LOG_LISTING = "Inventory Plugin"
MESSAGE_LOG_LABEL = "Inventory Plugin Errors"

logger = logging.getLogger("invgrid")


class MessageLog:
    """A listing of error messages under a name and a display label."""

    def __init__(self, name: str, label: str | None = None) -> None:
        self.name = name
        self.label = name if label is None else label
        self._messages: list[str] = []

    def error(self, text: str) -> None:
        """Record an error and pass it to the package logger."""
        self._messages.append(text)
        logger.error("[%s] %s", self.name, text)

    def messages(self) -> tuple[str, ...]:
        """Every message recorded so far, oldest first."""
        return tuple(self._messages)

    def __repr__(self) -> str:
        return f"MessageLog({self.name!r}, {self.label!r}, {len(self._messages)} messages)"


_listings: dict[str, MessageLog] = {}


def register_log_listing(name: str, label: str) -> MessageLog:
    """Register a listing under ``name``, or relabel the existing one."""
    log = _listings.get(name)
    if log is None:
        log = _listings[name] = MessageLog(name, label)
    else:
        log.label = label
    return log


def unregister_log_listing(name: str) -> bool:
    """Remove the listing; returns whether one was present."""
    return _listings.pop(name, None) is not None


def get_log_listing(name: str) -> MessageLog:
    """The listing under ``name``, created with ``name`` as its label if absent."""
    log = _listings.get(name)
    if log is None:
        log = _listings[name] = MessageLog(name)
    return log