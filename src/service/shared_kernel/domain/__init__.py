"""Shared Kernel Domain Layer"""

from src.service.shared_kernel.domain.aggregate_root import AggregateRoot
from src.service.shared_kernel.domain.domain_event import DomainEvent

__all__ = ['AggregateRoot', 'DomainEvent']
