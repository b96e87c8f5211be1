from src.service.payment.domain.value_object.money import Money

__all__ = ['Money']
