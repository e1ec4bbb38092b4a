"""
Event bus

Registry of client event handlers. Handlers run synchronously in
registration order; a failing handler is logged and skipped.
"""

from collections.abc import Callable
from typing import Any

from ..utils.logger import logger


class EventBus:
    """Client event bus"""

    def __init__(self):
        self._handlers: dict[str, list[Callable[..., Any]]] = {}

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        """Register a handler for an event"""
        handlers = self._handlers.setdefault(event, [])
        if handler not in handlers:
            handlers.append(handler)

    def off(self, event: str, handler: Callable[..., Any]) -> None:
        """Remove a handler, if registered"""
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, *args: Any) -> int:
        """
        Invoke every handler of an event.

        Returns:
            Number of handlers that completed without raising
        """
        delivered = 0
        for handler in list(self._handlers.get(event, [])):
            try:
                handler(*args)
                delivered += 1
            except Exception:
                logger.error(f"Handler {handler!r} for {event} failed", exc_info=True)
        return delivered

    def handler_count(self, event: str) -> int:
        return len(self._handlers.get(event, []))
