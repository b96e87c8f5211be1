"""
Reserve Ticket Use Case

1. Build a brand-new Ticket (records TicketReserved)
2. Save it
3. Publish the pending events, then drop them

Persisting and publishing are two independent calls: a publish failure
after a successful save leaves a stored ticket whose event was never sent.
"""

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.ticket_dto import TicketResponse
from src.service.booking.app.interface.i_ticket_repo import ITicketRepo
from src.service.booking.domain.service.ticket_service import TicketService
from src.service.shared_kernel.app.interface.i_event_publisher import IEventPublisher
from src.service.shared_kernel.domain.clock import Clock, utc_now_iso


class ReserveTicketUseCase:
    def __init__(
        self,
        *,
        ticket_service: TicketService,
        ticket_repo: ITicketRepo,
        event_publisher: IEventPublisher,
        clock: Clock = utc_now_iso,
    ) -> None:
        self.ticket_service = ticket_service
        self.ticket_repo = ticket_repo
        self.event_publisher = event_publisher
        self.clock = clock

    @Logger.io
    async def execute(
        self,
        *,
        flight_id: str,
        passenger_id: str,
        seat_number: str,
        departure_time: str,
        arrival_time: str,
    ) -> TicketResponse:
        ticket = self.ticket_service.create_ticket(
            flight_id=flight_id,
            passenger_id=passenger_id,
            seat_number=seat_number,
            booking_date=self.clock(),
            departure_time=departure_time,
            arrival_time=arrival_time,
        )

        await self.ticket_repo.save(ticket=ticket)
        await self.event_publisher.publish_all(events=ticket.get_events())
        ticket = ticket.clear_events()

        Logger.base.info(f'🎫 [BOOKING] Reserved ticket {ticket.ticket_id} on flight {flight_id}')
        return TicketResponse.from_ticket(ticket=ticket)
