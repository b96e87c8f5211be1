from decimal import Decimal
from typing import Any, Dict, Optional

import attrs

from src.service.payment.domain.entity.payment_entity import Payment


@attrs.define(frozen=True)
class PaymentResponse:
    """
    Flat view of a payment returned by the payment use cases.

    ``payment_date`` is set once the payment completed, ``refund_date``
    once it was refunded. Unset dates are left out of ``to_dict``.
    """

    payment_id: str
    ticket_id: str
    amount: Decimal
    currency: str
    payment_method: str
    status: str
    payment_date: Optional[str] = None
    refund_date: Optional[str] = None

    @classmethod
    def from_payment(cls, *, payment: Payment) -> 'PaymentResponse':
        return cls(
            payment_id=payment.payment_id,
            ticket_id=payment.ticket_id,
            amount=payment.amount.amount,
            currency=payment.amount.currency,
            payment_method=payment.payment_method.value,
            status=payment.status.value,
            payment_date=payment.payment_date,
            refund_date=payment.refund_date,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'paymentId': self.payment_id,
            'ticketId': self.ticket_id,
            'amount': self.amount,
            'currency': self.currency,
            'paymentMethod': self.payment_method,
            'status': self.status,
        }
        if self.payment_date is not None:
            data['paymentDate'] = self.payment_date
        if self.refund_date is not None:
            data['refundDate'] = self.refund_date
        return data
