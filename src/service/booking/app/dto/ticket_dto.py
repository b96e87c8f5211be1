"""Ticket response DTO shared by the reserve, check-in, cancel and list use cases."""

from typing import Any, Dict

import attrs

from src.service.booking.domain.entity.ticket_entity import Ticket


@attrs.define(frozen=True)
class TicketResponse:
    ticket_id: str
    flight_id: str
    passenger_id: str
    seat_number: str
    status: str

    @classmethod
    def from_ticket(cls, *, ticket: Ticket) -> 'TicketResponse':
        return cls(
            ticket_id=ticket.ticket_id,
            flight_id=ticket.flight_id,
            passenger_id=ticket.passenger_id,
            seat_number=ticket.seat_number,
            status=ticket.status.value,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ticketId': self.ticket_id,
            'flightId': self.flight_id,
            'passengerId': self.passenger_id,
            'seatNumber': self.seat_number,
            'status': self.status,
        }
