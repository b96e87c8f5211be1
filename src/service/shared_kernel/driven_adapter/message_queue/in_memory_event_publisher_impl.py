"""In-memory event publisher for local runs and tests."""

from typing import List, Sequence

from src.service.shared_kernel.app.interface.i_event_publisher import IEventPublisher
from src.service.shared_kernel.domain.domain_event import DomainEvent


class InMemoryEventPublisherImpl(IEventPublisher):
    def __init__(self) -> None:
        self.published_events: List[DomainEvent] = []
        self.submissions: List[List[DomainEvent]] = []

    async def publish(self, *, event: DomainEvent) -> None:
        self.submissions.append([event])
        self.published_events.append(event)

    async def publish_all(self, *, events: Sequence[DomainEvent]) -> None:
        if not events:
            return
        self.submissions.append(list(events))
        self.published_events.extend(events)

    def event_names(self) -> List[str]:
        return [event.event_name for event in self.published_events]
