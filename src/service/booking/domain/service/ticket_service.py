"""
Ticket Domain Service

Keeps use cases away from direct aggregate construction. No logic of its
own beyond assembling the FlightTime.
"""

from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.entity.ticket_entity import Ticket
from src.service.booking.domain.enum.ticket_status import TicketStatus
from src.service.booking.domain.value_object.flight_time import FlightTime
from src.service.shared_kernel.domain.id_generator import IdGenerator, new_uuid7


class TicketService:
    def __init__(self, *, id_generator: IdGenerator = new_uuid7) -> None:
        self.id_generator = id_generator

    @Logger.io
    def create_ticket(
        self,
        *,
        flight_id: str,
        passenger_id: str,
        seat_number: str,
        booking_date: str,
        departure_time: str,
        arrival_time: str,
    ) -> Ticket:
        flight_time = FlightTime(departure_time=departure_time, arrival_time=arrival_time)
        return Ticket.create(
            flight_id=flight_id,
            passenger_id=passenger_id,
            seat_number=seat_number,
            booking_date=booking_date,
            flight_time=flight_time,
            status=TicketStatus.RESERVED,
            id_generator=self.id_generator,
        )

    @Logger.io
    def check_in_ticket(self, *, ticket: Ticket) -> Ticket:
        return ticket.check_in()

    @Logger.io
    def cancel_ticket(self, *, ticket: Ticket) -> Ticket:
        return ticket.cancel()
