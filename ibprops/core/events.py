"""
Publish/subscribe channel owned by properties and sheets.

Usage:
    events = Events()
    events.on("change", lambda value: print(value))
    events.trigger("change", 42)
"""

from typing import Any, Callable, Dict, List, Optional


class Events:
    """Synchronous one-to-many event channel keyed by event name."""

    def __init__(self):
        self._handlers: Dict[str, List[Callable]] = {}

    def on(self, event: str, callback: Callable) -> Callable:
        """Subscribe to an event. Returns the callback so it can be used with off()."""
        self._handlers.setdefault(event, []).append(callback)
        return callback

    def once(self, event: str, callback: Callable) -> Callable:
        """Subscribe for a single delivery."""
        def wrapper(*args):
            self.off(event, wrapper)
            return callback(*args)

        return self.on(event, wrapper)

    def off(self, event: Optional[str] = None, callback: Optional[Callable] = None):
        """
        Unsubscribe.

        off() drops everything, off(event) drops every handler of that event,
        off(event, callback) drops one subscription.
        """
        if event is None:
            self._handlers = {}
            return
        if callback is None:
            self._handlers.pop(event, None)
            return
        handlers = self._handlers.get(event, [])
        if callback in handlers:
            handlers.remove(callback)
        if not handlers:
            self._handlers.pop(event, None)

    def trigger(self, event: str, *args: Any):
        """Deliver an event to every current subscriber, in subscription order."""
        # Copy so handlers can subscribe/unsubscribe while being called
        for callback in list(self._handlers.get(event, [])):
            callback(*args)

    def listener_count(self, event: str) -> int:
        return len(self._handlers.get(event, []))
