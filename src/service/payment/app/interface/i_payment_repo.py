"""Payment Repository Interface (Payment context)"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.payment.domain.entity.payment_entity import Payment


class IPaymentRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, payment_id: str) -> Optional[Payment]:
        pass

    @abstractmethod
    async def save(self, *, payment: Payment) -> None:
        """Upsert: creates the record or overwrites the existing one"""
        pass

    @abstractmethod
    async def find_by_ticket_id(self, *, ticket_id: str) -> List[Payment]:
        """
        Every payment attempt made for a ticket, failed ones included.
        Unordered; empty when the ticket has none.
        """
        pass
