"""Simple synchronous in-process event bus."""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable

from sutra.domain.models import Message
from sutra.domain.topics import Topic

LOGGER = logging.getLogger(__name__)

Handler = Callable[[Any], None]
Disposer = Callable[[], None]


def _same_handler(registered: Handler, handler: Handler) -> bool:
    # Attribute access builds a new bound method each time, so those compare by ==.
    if inspect.ismethod(registered) and inspect.ismethod(handler):
        return registered == handler
    return registered is handler


def _find(handlers: list[Handler], handler: Handler) -> int | None:
    for index, registered in enumerate(handlers):
        if _same_handler(registered, handler):
            return index
    return None


@dataclass(frozen=True)
class HandlerFailure:
    """A handler that raised while a payload was being delivered to it."""

    topic: str
    handler: Handler
    error: Exception


class EventBus:
    """Publish/subscribe bus keyed by topic name.

    Handlers are called synchronously in registration order. A handler is
    registered at most once per topic. Exceptions raised by a handler are
    logged and reported back from ``publish``; they never stop delivery to
    the other handlers.
    """

    def __init__(self) -> None:
        # Lists rather than sets: handlers need not be hashable.
        self._subscribers: dict[str, list[Handler]] = defaultdict(list)

    def subscribe(self, topic: Topic, handler: Handler) -> Disposer:
        """Register *handler* for *topic* and return a function that removes it."""
        handlers = self._subscribers[topic]
        if _find(handlers, handler) is None:
            handlers.append(handler)
        LOGGER.debug("Subscribed %r to %s", handler, topic)

        def dispose() -> None:
            self.unsubscribe(topic, handler)

        return dispose

    def unsubscribe(self, topic: Topic, handler: Handler) -> None:
        handlers = self._subscribers.get(topic)
        index = None if handlers is None else _find(handlers, handler)
        if index is None:
            return
        del handlers[index]
        if not handlers:
            del self._subscribers[topic]
        LOGGER.debug("Unsubscribed %r from %s", handler, topic)

    def has_subscribers(self, topic: Topic) -> bool:
        return bool(self._subscribers.get(topic))

    def publish(self, topic: Topic, payload: Any = None) -> list[HandlerFailure]:
        """Deliver *payload* to every handler currently subscribed to *topic*.

        Iterates over a snapshot, so handlers added during delivery wait for
        the next publish. A handler removed during delivery is skipped if it
        has not been called yet.
        """
        handlers = self._subscribers.get(topic)
        if not handlers:
            LOGGER.debug("No subscribers for %s", topic)
            return []

        failures: list[HandlerFailure] = []
        for handler in list(handlers):
            current = self._subscribers.get(topic)
            if not current or not any(h is handler for h in current):
                continue
            try:
                handler(payload)
            except Exception as exc:
                LOGGER.exception("Handler %r failed for %s", handler, topic)
                failures.append(HandlerFailure(topic=str(topic), handler=handler, error=exc))
        return failures

    def send(self, message: Message) -> list[HandlerFailure]:
        """Publish a typed envelope on its own topic."""
        return self.publish(message.topic, message.payload)
