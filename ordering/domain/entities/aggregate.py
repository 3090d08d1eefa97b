"""Event collection shared by aggregate roots."""
from typing import List

from ..events.base import DomainEvent


class AggregateRoot:
    """
    Mixin for aggregate roots that record domain events.

    Subclasses must initialise `_domain_events` (dataclass field).
    """

    _domain_events: List[DomainEvent]

    def get_domain_events(self) -> List[DomainEvent]:
        """
        Get all domain events collected by this aggregate.

        Returns:
            Copy of the pending events, oldest first
        """
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear all collected domain events (after publishing)."""
        self._domain_events.clear()

    def pull_domain_events(self) -> List[DomainEvent]:
        """Return pending events and clear them."""
        events = self.get_domain_events()
        self.clear_domain_events()
        return events

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
