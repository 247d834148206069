"""Observer registry for supervisor notifications."""

import logging
from typing import Any, Callable, Dict, List

_LOGGER = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class EventRegistry:
    """Mapping from event name to an ordered set of listeners.

    Listeners run synchronously, in registration order, on dispatch.
    Registering the same listener twice for one event is a no-op, and a
    listener that raises does not prevent the others from running.

    Example:
        >>> registry = EventRegistry()
        >>> registry.add_listener("statechange", print)
        >>> registry.dispatch("statechange", "connected")
        connected
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._listeners: Dict[str, List[Listener]] = {}

    def add_listener(self, event_type: str, listener: Listener) -> None:
        """Register ``listener`` for ``event_type``.

        Args:
            event_type: Event name (e.g. "statechange")
            listener: Callable receiving the event object
        """
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_listener(self, event_type: str, listener: Listener) -> None:
        """Unregister ``listener``. Unknown listeners are ignored."""
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)
            if not listeners:
                del self._listeners[event_type]

    def dispatch(self, event_type: str, event: Any) -> int:
        """Deliver ``event`` to every listener of ``event_type``.

        Listeners added or removed during dispatch take effect on the next
        dispatch.

        Returns:
            Number of listeners invoked
        """
        listeners = list(self._listeners.get(event_type, ()))
        for listener in listeners:
            try:
                listener(event)
            except Exception as err:
                _LOGGER.error(
                    "Error in %s listener %r: %s",
                    event_type,
                    listener,
                    err,
                    exc_info=True,
                )
        return len(listeners)

    def listener_count(self, event_type: str) -> int:
        """Number of listeners registered for ``event_type``."""
        return len(self._listeners.get(event_type, ()))
