"""
Event Publisher Interface

Application layer abstraction for handing domain events to the event bus.
Use cases depend on this port, never on the EventBridge client.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from src.service.shared_kernel.domain.domain_event import DomainEvent


class IEventPublisher(ABC):
    @abstractmethod
    async def publish(self, *, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Raises:
            PublishError: If the transport rejects the event
        """
        pass

    @abstractmethod
    async def publish_all(self, *, events: Sequence[DomainEvent]) -> None:
        """
        Publish events in order as one submission.

        An empty sequence is a successful no-op.

        Raises:
            PublishError: If the transport rejects any entry
        """
        pass
