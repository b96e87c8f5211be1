from src.service.payment.app.interface.i_payment_repo import IPaymentRepo

__all__ = ['IPaymentRepo']
