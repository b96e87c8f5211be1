"""
Payment Aggregate Root (Payment context)

State machine:
    PENDING -> COMPLETED  (PaymentProcessed)
    PENDING -> FAILED     (no event)
    COMPLETED -> REFUNDED (RefundIssued)

REFUNDED and FAILED are terminal. Transitions return a new Payment and
leave the receiver untouched.
"""

from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidStateError
from src.platform.logging.loguru_io import Logger
from src.service.payment.domain.domain_event.payment_domain_event import (
    PaymentProcessedEvent,
    RefundIssuedEvent,
)
from src.service.payment.domain.enum.payment_method import PaymentMethod
from src.service.payment.domain.enum.payment_status import PaymentStatus
from src.service.payment.domain.value_object.money import Money
from src.service.shared_kernel.domain.aggregate_root import AggregateRoot
from src.service.shared_kernel.domain.clock import Clock, utc_now_iso
from src.service.shared_kernel.domain.id_generator import IdGenerator, new_uuid7
from src.service.shared_kernel.domain.validators import StringValidators, enum_converter


@attrs.define(frozen=True, kw_only=True)
class Payment(AggregateRoot):
    payment_id: str = attrs.field(validator=StringValidators.required)
    ticket_id: str = attrs.field(validator=StringValidators.required)
    amount: Money = attrs.field(validator=attrs.validators.instance_of(Money))
    payment_method: PaymentMethod = attrs.field(converter=enum_converter(PaymentMethod))
    status: PaymentStatus = attrs.field(
        default=PaymentStatus.PENDING, converter=enum_converter(PaymentStatus)
    )
    payment_date: Optional[str] = None
    refund_date: Optional[str] = None
    failure_reason: Optional[str] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        ticket_id: str,
        amount: Money,
        payment_method: PaymentMethod | str,
        payment_id: Optional[str] = None,
        id_generator: IdGenerator = new_uuid7,
    ) -> 'Payment':
        """New PENDING payment. Nothing is recorded until it is completed."""
        return cls(
            payment_id=payment_id or id_generator(),
            ticket_id=ticket_id,
            amount=amount,
            payment_method=payment_method,
        )

    @Logger.io
    def mark_as_completed(self, *, clock: Clock = utc_now_iso) -> 'Payment':
        if self.status != PaymentStatus.PENDING:
            raise InvalidStateError(
                f'Cannot complete payment that is in {self.status.value} state'
            )

        payment_date = clock()
        return self._with_event(
            PaymentProcessedEvent(
                aggregate_id=self.payment_id,
                payment_id=self.payment_id,
                ticket_id=self.ticket_id,
                amount=self.amount.amount,
                currency=self.amount.currency,
                payment_method=self.payment_method.value,
                payment_date=payment_date,
            ),
            status=PaymentStatus.COMPLETED,
            payment_date=payment_date,
        )

    @Logger.io
    def mark_as_failed(self, *, reason: str) -> 'Payment':
        if self.status != PaymentStatus.PENDING:
            raise InvalidStateError(
                f'Cannot mark payment as failed that is in {self.status.value} state'
            )

        return attrs.evolve(self, status=PaymentStatus.FAILED, failure_reason=reason)

    @Logger.io
    def refund(self, *, reason: str, clock: Clock = utc_now_iso) -> 'Payment':
        if self.status != PaymentStatus.COMPLETED:
            raise InvalidStateError(f'Cannot refund payment that is in {self.status.value} state')

        refund_date = clock()
        return self._with_event(
            RefundIssuedEvent(
                aggregate_id=self.payment_id,
                payment_id=self.payment_id,
                ticket_id=self.ticket_id,
                amount=self.amount.amount,
                currency=self.amount.currency,
                refund_date=refund_date,
                reason=reason,
            ),
            status=PaymentStatus.REFUNDED,
            refund_date=refund_date,
        )
