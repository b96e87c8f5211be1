from src.service.payment.domain.enum.payment_method import PaymentMethod
from src.service.payment.domain.enum.payment_status import PaymentStatus

__all__ = ['PaymentMethod', 'PaymentStatus']
