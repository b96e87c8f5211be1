"""
Payment Domain Events

Published with source ``com.travier.payment``. A failed payment has no
event of its own.
"""

from decimal import Decimal
from typing import ClassVar

import attrs

from src.service.shared_kernel.domain.domain_event import DomainEvent


@attrs.define(frozen=True, kw_only=True)
class PaymentProcessedEvent(DomainEvent):
    EVENT_NAME: ClassVar[str] = 'PaymentProcessed'

    payment_id: str
    ticket_id: str
    amount: Decimal
    currency: str
    payment_method: str
    payment_date: str


@attrs.define(frozen=True, kw_only=True)
class RefundIssuedEvent(DomainEvent):
    EVENT_NAME: ClassVar[str] = 'RefundIssued'

    payment_id: str
    ticket_id: str
    amount: Decimal
    currency: str
    refund_date: str
    reason: str
