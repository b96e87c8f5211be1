from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.ticket_dto import TicketResponse
from src.service.booking.app.interface.i_ticket_repo import ITicketRepo


class ListTicketsUseCase:
    def __init__(self, *, ticket_repo: ITicketRepo) -> None:
        self.ticket_repo = ticket_repo

    @Logger.io
    async def by_flight(self, *, flight_id: str) -> List[TicketResponse]:
        tickets = await self.ticket_repo.find_by_flight_id(flight_id=flight_id)
        return [TicketResponse.from_ticket(ticket=ticket) for ticket in tickets]

    @Logger.io
    async def by_passenger(self, *, passenger_id: str) -> List[TicketResponse]:
        tickets = await self.ticket_repo.find_by_passenger_id(passenger_id=passenger_id)
        return [TicketResponse.from_ticket(ticket=ticket) for ticket in tickets]
