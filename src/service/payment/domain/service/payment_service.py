"""
Payment Domain Service

Seam for a real payment gateway. Today processing simply completes the
payment and refunding simply refunds it.
"""

from decimal import Decimal

from src.platform.logging.loguru_io import Logger
from src.service.payment.domain.entity.payment_entity import Payment
from src.service.payment.domain.enum.payment_method import PaymentMethod
from src.service.payment.domain.value_object.money import Money
from src.service.shared_kernel.domain.clock import Clock, utc_now_iso
from src.service.shared_kernel.domain.id_generator import IdGenerator, new_uuid7


class PaymentService:
    def __init__(
        self, *, id_generator: IdGenerator = new_uuid7, clock: Clock = utc_now_iso
    ) -> None:
        self.id_generator = id_generator
        self.clock = clock

    @Logger.io
    def create_payment(
        self,
        *,
        ticket_id: str,
        amount: Decimal | int | float | str,
        currency: str,
        payment_method: PaymentMethod | str,
    ) -> Payment:
        money = Money(amount=amount, currency=currency)
        return Payment.create(
            ticket_id=ticket_id,
            amount=money,
            payment_method=payment_method,
            id_generator=self.id_generator,
        )

    @Logger.io
    def process_payment(self, *, payment: Payment) -> Payment:
        return payment.mark_as_completed(clock=self.clock)

    @Logger.io
    def refund_payment(self, *, payment: Payment, reason: str) -> Payment:
        return payment.refund(reason=reason, clock=self.clock)

    @Logger.io
    def fail_payment(self, *, payment: Payment, reason: str) -> Payment:
        return payment.mark_as_failed(reason=reason)
