from src.service.payment.domain.domain_event.payment_domain_event import (
    PaymentProcessedEvent,
    RefundIssuedEvent,
)

__all__ = ['PaymentProcessedEvent', 'RefundIssuedEvent']
