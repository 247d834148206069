"""Event notification plumbing."""

from .event_registry import EventRegistry, Listener

__all__ = [
    "EventRegistry",
    "Listener",
]
