"""
In-process event bus - synchronous broadcast to registered listeners
"""
import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List

log = logging.getLogger(__name__)

Listener = Callable[[Dict[str, Any]], None]


class EventBus:
    # Owned by the composition root and handed to every component that emits or listens

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, event_name: str, listener: Listener) -> Callable[[], None]:
        # Register a listener; the returned callable unsubscribes it
        self._listeners[event_name].append(listener)
        return lambda: self.unsubscribe(event_name, listener)

    def unsubscribe(self, event_name: str, listener: Listener):
        listeners = self._listeners.get(event_name, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event_name: str, payload: Dict[str, Any]) -> int:
        # Dispatch in subscription order; a failing listener does not stop the rest
        delivered = 0
        for listener in list(self._listeners.get(event_name, [])):
            try:
                listener(payload)
                delivered += 1
            except Exception:
                log.exception("Listener for %s failed", event_name)
        return delivered

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, []))
