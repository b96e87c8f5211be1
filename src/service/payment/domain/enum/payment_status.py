from enum import StrEnum


class PaymentStatus(StrEnum):
    PENDING = 'PENDING'
    COMPLETED = 'COMPLETED'
    REFUNDED = 'REFUNDED'  # terminal
    FAILED = 'FAILED'  # terminal
