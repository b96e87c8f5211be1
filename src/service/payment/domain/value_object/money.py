"""
Money Value Object

Non-negative decimal amount in a 3-letter currency. Arithmetic returns new
instances and refuses to mix currencies.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

import attrs

from src.platform.exception.exceptions import ValidationError


def _to_decimal(value: Any) -> Decimal:
    # bool is an int subclass; True must not become 1
    if isinstance(value, bool):
        raise ValidationError('Amount must be a number')
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError('Amount must be a number') from None
    if not amount.is_finite():
        raise ValidationError('Amount must be a number')
    return amount


def _validate_amount(_instance: Any, _attribute: Any, value: Decimal) -> None:
    if value < 0:
        raise ValidationError('Amount cannot be negative')


def _normalize_currency(value: Any) -> str:
    if not isinstance(value, str) or len(value.strip()) != 3:
        raise ValidationError('Currency must be a valid 3-letter ISO currency code')
    return value.strip().upper()


@attrs.define(frozen=True)
class Money:
    amount: Decimal = attrs.field(converter=_to_decimal, validator=_validate_amount)
    currency: str = attrs.field(converter=_normalize_currency)

    def add(self, other: 'Money') -> 'Money':
        if self.currency != other.currency:
            raise ValidationError('Cannot add money with different currencies')
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: 'Money') -> 'Money':
        if self.currency != other.currency:
            raise ValidationError('Cannot subtract money with different currencies')
        if self.amount < other.amount:
            raise ValidationError('Cannot subtract a larger amount from a smaller amount')
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def equals(self, other: 'Money') -> bool:
        return self == other

    def __str__(self) -> str:
        return f'{self.amount} {self.currency}'
