from enum import StrEnum


class TicketStatus(StrEnum):
    RESERVED = 'RESERVED'
    CHECKED_IN = 'CHECKED_IN'
    CANCELLED = 'CANCELLED'
