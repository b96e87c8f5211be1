from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.ticket_dto import TicketResponse
from src.service.booking.app.interface.i_ticket_repo import ITicketRepo
from src.service.booking.domain.service.ticket_service import TicketService
from src.service.shared_kernel.app.interface.i_event_publisher import IEventPublisher


class CheckInTicketUseCase:
    def __init__(
        self,
        *,
        ticket_service: TicketService,
        ticket_repo: ITicketRepo,
        event_publisher: IEventPublisher,
    ) -> None:
        self.ticket_service = ticket_service
        self.ticket_repo = ticket_repo
        self.event_publisher = event_publisher

    @Logger.io
    async def execute(self, *, ticket_id: str) -> TicketResponse:
        ticket = await self.ticket_repo.get_by_id(ticket_id=ticket_id)
        if not ticket:
            raise NotFoundError(f'Ticket with ID {ticket_id} not found')

        ticket = self.ticket_service.check_in_ticket(ticket=ticket)

        await self.ticket_repo.save(ticket=ticket)
        await self.event_publisher.publish_all(events=ticket.get_events())
        ticket = ticket.clear_events()

        return TicketResponse.from_ticket(ticket=ticket)
