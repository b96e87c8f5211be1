from typing import Dict, List, Optional

from src.service.booking.app.interface.i_ticket_repo import ITicketRepo
from src.service.booking.domain.entity.ticket_entity import Ticket


class TicketRepoInMemoryImpl(ITicketRepo):
    """Dict-backed repository for local runs and tests"""

    def __init__(self) -> None:
        self.tickets: Dict[str, Ticket] = {}
        self.save_count = 0

    async def get_by_id(self, *, ticket_id: str) -> Optional[Ticket]:
        return self.tickets.get(ticket_id)

    async def save(self, *, ticket: Ticket) -> None:
        self.tickets[ticket.ticket_id] = ticket.clear_events()
        self.save_count += 1

    async def find_by_flight_id(self, *, flight_id: str) -> List[Ticket]:
        return [t for t in self.tickets.values() if t.flight_id == flight_id]

    async def find_by_passenger_id(self, *, passenger_id: str) -> List[Ticket]:
        return [t for t in self.tickets.values() if t.passenger_id == passenger_id]
