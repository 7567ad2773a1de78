from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from .models import Event, EventKind

LOGGER = logging.getLogger("holdem.events")

Subscriber = Callable[[Event], None]

# EventChannel replaces a global event bus: one instance is built at startup and
# handed to every component that announces something.


class EventChannel:
    def __init__(self) -> None:
        self._subscribers: Dict[Optional[EventKind], List[Subscriber]] = {}
        self.published = 0

    def subscribe(self, subscriber: Subscriber, kinds: Optional[Iterable[EventKind]] = None) -> None:
        """Register ``subscriber`` for ``kinds`` (every kind when omitted)."""
        keys: List[Optional[EventKind]] = list(kinds) if kinds is not None else [None]
        for key in keys:
            self._subscribers.setdefault(key, []).append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        for subscribers in self._subscribers.values():
            while subscriber in subscribers:
                subscribers.remove(subscriber)

    def publish(self, kind: EventKind, text: str) -> Event:
        event = Event(kind=kind, text=text)
        self.published += 1
        targets = self._subscribers.get(kind, []) + self._subscribers.get(None, [])
        for subscriber in targets:
            try:
                subscriber(event)
            except Exception:
                # Observers never get to break a hand in progress.
                LOGGER.exception("Subscriber %r failed on %s event", subscriber, kind.value)
        return event
