"""
Ticket Domain Events

Published to the shared event bus with source ``com.travier.booking``.
The payment context subscribes to TicketReserved and TicketCancelled.
"""

from typing import ClassVar

import attrs

from src.service.shared_kernel.domain.domain_event import DomainEvent


@attrs.define(frozen=True, kw_only=True)
class TicketReservedEvent(DomainEvent):
    """Fired only when a brand-new ticket is created"""

    EVENT_NAME: ClassVar[str] = 'TicketReserved'

    ticket_id: str
    flight_id: str
    passenger_id: str
    seat_number: str
    booking_date: str


@attrs.define(frozen=True, kw_only=True)
class TicketCheckedInEvent(DomainEvent):
    EVENT_NAME: ClassVar[str] = 'TicketCheckedIn'

    ticket_id: str


@attrs.define(frozen=True, kw_only=True)
class TicketCancelledEvent(DomainEvent):
    EVENT_NAME: ClassVar[str] = 'TicketCancelled'

    ticket_id: str
