"""Application layer DTOs"""

from src.service.booking.app.dto.ticket_dto import TicketResponse

__all__ = ['TicketResponse']
