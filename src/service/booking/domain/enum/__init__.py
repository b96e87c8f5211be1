from src.service.booking.domain.enum.ticket_status import TicketStatus

__all__ = ['TicketStatus']
