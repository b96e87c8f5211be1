"""Application layer DTOs"""

from src.service.payment.app.dto.payment_dto import PaymentResponse

__all__ = ['PaymentResponse']
