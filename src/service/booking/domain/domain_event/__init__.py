from src.service.booking.domain.domain_event.ticket_domain_event import (
    TicketCancelledEvent,
    TicketCheckedInEvent,
    TicketReservedEvent,
)

__all__ = ['TicketCancelledEvent', 'TicketCheckedInEvent', 'TicketReservedEvent']
