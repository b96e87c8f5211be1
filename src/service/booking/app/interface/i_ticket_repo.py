"""
Ticket Repository Interface (Booking context)

Single-item key-value access plus two secondary lookups. Results of the
lookups are unordered and may be empty.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.booking.domain.entity.ticket_entity import Ticket


class ITicketRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, ticket_id: str) -> Optional[Ticket]:
        """
        Args:
            ticket_id: Ticket ID

        Returns:
            Rehydrated Ticket (no pending events) or None if not found
        """
        pass

    @abstractmethod
    async def save(self, *, ticket: Ticket) -> None:
        """Upsert: creates the record or overwrites the existing one"""
        pass

    @abstractmethod
    async def find_by_flight_id(self, *, flight_id: str) -> List[Ticket]:
        pass

    @abstractmethod
    async def find_by_passenger_id(self, *, passenger_id: str) -> List[Ticket]:
        pass
