import pytest

from src.service.booking.domain.domain_event.ticket_domain_event import (
    TicketCancelledEvent,
    TicketCheckedInEvent,
)
from src.service.shared_kernel.driven_adapter.message_queue.in_memory_event_publisher_impl import (
    InMemoryEventPublisherImpl,
)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_in_memory_publisher_keeps_batches_in_order() -> None:
    publisher = InMemoryEventPublisherImpl()

    await publisher.publish_all(events=[])
    await publisher.publish_all(
        events=[
            TicketCheckedInEvent(aggregate_id='t1', ticket_id='t1'),
            TicketCancelledEvent(aggregate_id='t1', ticket_id='t1'),
        ]
    )
    await publisher.publish(event=TicketCancelledEvent(aggregate_id='t2', ticket_id='t2'))

    assert publisher.event_names() == ['TicketCheckedIn', 'TicketCancelled', 'TicketCancelled']
    assert [len(batch) for batch in publisher.submissions] == [2, 1]
