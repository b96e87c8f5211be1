"""
Ticket Aggregate Root (Booking context)

State machine:
    RESERVED -> CHECKED_IN
    RESERVED -> CANCELLED
    CANCELLED -> CANCELLED (re-cancel is accepted and recorded again)
    CHECKED_IN -> CANCELLED is rejected: once checked in, a ticket can no
    longer be cancelled.

Transitions never mutate the receiver. Each returns a new Ticket carrying
the recorded event in its pending buffer.
"""

from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidStateError
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.domain_event.ticket_domain_event import (
    TicketCancelledEvent,
    TicketCheckedInEvent,
    TicketReservedEvent,
)
from src.service.booking.domain.enum.ticket_status import TicketStatus
from src.service.booking.domain.value_object.flight_time import FlightTime
from src.service.shared_kernel.domain.aggregate_root import AggregateRoot
from src.service.shared_kernel.domain.id_generator import IdGenerator, new_uuid7
from src.service.shared_kernel.domain.validators import StringValidators, enum_converter


@attrs.define(frozen=True, kw_only=True)
class Ticket(AggregateRoot):
    ticket_id: str = attrs.field(validator=StringValidators.required)
    flight_id: str = attrs.field(validator=StringValidators.required)
    passenger_id: str = attrs.field(validator=StringValidators.required)
    seat_number: str = attrs.field(validator=StringValidators.required)
    booking_date: str = attrs.field(validator=StringValidators.required)
    flight_time: FlightTime = attrs.field(validator=attrs.validators.instance_of(FlightTime))
    status: TicketStatus = attrs.field(
        default=TicketStatus.RESERVED, converter=enum_converter(TicketStatus)
    )

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        flight_id: str,
        passenger_id: str,
        seat_number: str,
        booking_date: str,
        flight_time: FlightTime,
        status: TicketStatus = TicketStatus.RESERVED,
        ticket_id: Optional[str] = None,
        id_generator: IdGenerator = new_uuid7,
    ) -> 'Ticket':
        """
        Build a ticket.

        Without a ``ticket_id`` (None or empty) the ticket is brand new: an id
        is drawn from ``id_generator`` and TicketReserved is recorded. With a
        caller-supplied id nothing is recorded, whatever the status.
        """
        is_new = not ticket_id
        ticket = cls(
            ticket_id=id_generator() if is_new else ticket_id,
            flight_id=flight_id,
            passenger_id=passenger_id,
            seat_number=seat_number,
            booking_date=booking_date,
            flight_time=flight_time,
            status=status,
        )
        if not is_new:
            return ticket

        return ticket._with_event(
            TicketReservedEvent(
                aggregate_id=ticket.ticket_id,
                ticket_id=ticket.ticket_id,
                flight_id=ticket.flight_id,
                passenger_id=ticket.passenger_id,
                seat_number=ticket.seat_number,
                booking_date=ticket.booking_date,
            )
        )

    @Logger.io
    def check_in(self) -> 'Ticket':
        if self.status != TicketStatus.RESERVED:
            raise InvalidStateError('Cannot check in, as the ticket is not in a "Reserved" state')

        return self._with_event(
            TicketCheckedInEvent(aggregate_id=self.ticket_id, ticket_id=self.ticket_id),
            status=TicketStatus.CHECKED_IN,
        )

    @Logger.io
    def cancel(self) -> 'Ticket':
        if self.status == TicketStatus.CHECKED_IN:
            raise InvalidStateError('Cannot cancel, as the ticket is already checked in')

        return self._with_event(
            TicketCancelledEvent(aggregate_id=self.ticket_id, ticket_id=self.ticket_id),
            status=TicketStatus.CANCELLED,
        )
