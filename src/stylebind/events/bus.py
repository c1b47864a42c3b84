"""Simple synchronous event bus for rule store notifications."""

from typing import Any, Callable


class EventBus:
    """Synchronous publish-subscribe event bus.

    Listeners can subscribe to specific event types or receive all events.
    Events are dispatched synchronously in registration order, so every
    listener has run by the time ``emit`` returns.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, event_type: type, callback: Callable) -> None:
        """Register a callback for a specific event type."""
        self._listeners.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Callable) -> None:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)

    def unsubscribe(self, callback: Callable) -> None:
        """Remove *callback* from every registration it appears in."""
        self._global_listeners = [cb for cb in self._global_listeners if cb is not callback]
        for event_type, callbacks in self._listeners.items():
            self._listeners[event_type] = [cb for cb in callbacks if cb is not callback]

    def emit(self, event: Any) -> None:
        """Dispatch an event to all matching listeners."""
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
