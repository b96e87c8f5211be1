from src.service.booking.app.interface.i_ticket_repo import ITicketRepo

__all__ = ['ITicketRepo']
