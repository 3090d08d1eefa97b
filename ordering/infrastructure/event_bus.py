"""
Event Bus Implementation (Infrastructure Layer).

Delivers domain events to in-process subscribers.
"""
from typing import Awaitable, Callable, Dict, List, Optional, Union
import inspect
import logging

from ordering.domain.event_bus import EventBus
from ordering.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]


class InMemoryEventBus(EventBus):
    """
    In-Memory Event Bus Implementation.

    Features:
    - Subscribers per event type (class name) or for every event
    - Sync and async handlers
    - Events delivered in the order they are published

    Events are not retained after delivery.
    A failing subscriber is logged and its error re-raised; later
    subscribers of that event are not called.
    """

    def __init__(self):
        """Initialize event bus with subscribers."""
        self._subscribers: Dict[str, List[EventHandler]] = {}
        self._catch_all: List[EventHandler] = []

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")
        await self._notify_subscribers(event)

    async def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish multiple domain events in order.

        Args:
            events: List of domain events to publish
        """
        if not events:
            return

        logger.info(f"Publishing {len(events)} events")
        for event in events:
            await self.publish(event)

    def subscribe(self, event_type: Optional[str], handler: EventHandler) -> None:
        """
        Subscribe to domain events.

        Args:
            event_type: Event class name (e.g. "OrderStartedEvent"), None for all
            handler: Callback receiving the event
        """
        if event_type is None:
            self._catch_all.append(handler)
        else:
            self._subscribers.setdefault(event_type, []).append(handler)
        logger.info(f"Registered event subscriber: {getattr(handler, '__name__', handler)} ({event_type or '*'})")

    def unsubscribe(self, event_type: Optional[str], handler: EventHandler) -> None:
        handlers = self._catch_all if event_type is None else self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        """Notify the subscribers of an event."""
        handlers = self._subscribers.get(event.event_type, []) + self._catch_all
        if not handlers:
            return

        logger.debug(f"Notifying {len(handlers)} subscribers about {event.event_type}")

        for handler in handlers:
            try:
                if inspect.iscoroutinefunction(handler):
                    await handler(event)
                else:
                    handler(event)
            except Exception as e:
                logger.error(
                    f"Subscriber {getattr(handler, '__name__', handler)} failed on {event.event_type}: {e}",
                    exc_info=True,
                )
                raise


# Global event bus instance
_event_bus_instance: Optional[InMemoryEventBus] = None


def get_event_bus() -> InMemoryEventBus:
    """
    Get or create global event bus instance.

    Returns:
        Global event bus instance
    """
    global _event_bus_instance

    if _event_bus_instance is None:
        _event_bus_instance = InMemoryEventBus()

    return _event_bus_instance
