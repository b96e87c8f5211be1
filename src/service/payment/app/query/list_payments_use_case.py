from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.payment.app.dto.payment_dto import PaymentResponse
from src.service.payment.app.interface.i_payment_repo import IPaymentRepo


class ListPaymentsUseCase:
    def __init__(self, *, payment_repo: IPaymentRepo) -> None:
        self.payment_repo = payment_repo

    @Logger.io
    async def by_ticket(self, *, ticket_id: str) -> List[PaymentResponse]:
        payments = await self.payment_repo.find_by_ticket_id(ticket_id=ticket_id)
        return [PaymentResponse.from_payment(payment=payment) for payment in payments]
