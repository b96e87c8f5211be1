from typing import Dict, List, Optional

from src.service.payment.app.interface.i_payment_repo import IPaymentRepo
from src.service.payment.domain.entity.payment_entity import Payment


class PaymentRepoInMemoryImpl(IPaymentRepo):
    """Dict-backed repository for local runs and tests"""

    def __init__(self) -> None:
        self.payments: Dict[str, Payment] = {}
        self.save_count = 0

    async def get_by_id(self, *, payment_id: str) -> Optional[Payment]:
        return self.payments.get(payment_id)

    async def save(self, *, payment: Payment) -> None:
        self.payments[payment.payment_id] = payment.clear_events()
        self.save_count += 1

    async def find_by_ticket_id(self, *, ticket_id: str) -> List[Payment]:
        return [p for p in self.payments.values() if p.ticket_id == ticket_id]
