"""Commit a unit of work, then hand the aggregates' events to the bus."""
from typing import Sequence
import logging

from ordering.domain.entities import AggregateRoot
from ordering.domain.event_bus import EventBus
from ordering.domain.repositories import UnitOfWork


logger = logging.getLogger(__name__)


async def save_and_publish(
    unit_of_work: UnitOfWork,
    event_bus: EventBus,
    aggregates: Sequence[AggregateRoot],
) -> bool:
    """
    Commit staged changes and publish pending events on success.

    Events are drained in aggregate order, so events of earlier aggregates
    are published first. Nothing is published when no row was affected;
    the events stay on the aggregates.

    Returns:
        True if at least one row was affected
    """
    affected = await unit_of_work.save_changes()
    if affected <= 0:
        logger.warning("Commit affected no rows, nothing persisted")
        return False

    events = []
    for aggregate in aggregates:
        events.extend(aggregate.pull_domain_events())

    logger.info(f"Commit affected {affected} row(s), publishing {len(events)} event(s)")
    await event_bus.publish_all(events)
    return True
